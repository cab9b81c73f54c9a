# elteshop_e2e/config/locators.py

"""Locator table for every page object.

Selectors are the most brittle part of the suite, so none of them are
hard-coded in the page objects. Each page reads its locators from this table,
keyed by page name and element name. Entries can be overridden (for a staging
site or after a markup change) with a JSON file of the same shape::

    {"home": {"logo": "css=header img.logo"}}

pointed to by the ``LOCATORS_FILE`` environment variable.
"""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache

from elteshop_e2e.config.config import LOCATORS_FILE
from elteshop_e2e.core.exceptions import LocatorConfigError, MissingLocatorError
from elteshop_e2e.utils.locator import Locator

logger = logging.getLogger(__name__)


DEFAULT_LOCATORS = {
    "home": {
        "search_input": "xpath=//input[@placeholder='Keywords']",
        "search_button": "xpath=//button[@onclick='moduleSearch();']",
        "logo": "xpath=//div[contains(@class, 'header-navbar-top-center')]//img[@alt='ELTE SHOP ']",
        "navigation_menu": "xpath=//div[@id='category-nav']/ul",
        "navigation_item": "tag_name=li",
        # cat_133 is the "Clothes" category
        "clothes_menu": "xpath=//li[@id='cat_133']/a",
        "products_menu": "link_text=Products",
        "new_menu": "link_text=New",
        "cookie_accept": "link_text=Elfogadom",
    },
    "product_list": {
        "product_items": "css=h2.product-card-item",
        "product_link": "tag_name=a",
        "page_heading": "css=h1.page-head-title",
        "results_count": "xpath=//div[contains(@class, 'sortbar-bottom')]//div[@class='results']",
    },
    "product_detail": {
        "product_name": "css=h1.product-page-head-title span.product-page-product-name",
        "quantity_input": "id=input-quantity",
        "add_to_cart_button": "id=button-cart",
        "description": "css=#tab-description",
        "option_select": "css=.form-group select",
        "radio_option": "css=input[type='radio']",
        "stock_info": "css=.stock-info",
        "cart_success": "css=.alert-success",
    },
    "contact": {
        "contact_form": "id=contact",
        "name_input": "id=form-element-name",
        "email_input": "id=form-element-email",
        "enquiry_textarea": "id=form-element-enquiry",
        "gdpr_consent_checkbox": "id=form-element-gdpr_consent",
        "continue_button": "css=.buttons.contact-buttons .btn.btn-primary",
        "contact_info": "id=contact-info",
        "success_message": "css=.alert-success",
    },
    "user_account": {
        "email_input": "id=email_login",
        "password_input": "id=password_login",
        "login_button": "xpath=//button[span[text()='Login']]",
        "login_button_fallback": "css=form button[type='submit']",
        "login_header": "xpath=//h1[contains(@class, 'page-head-title') and contains(., 'Login')]",
        "login_error": "css=.alert.alert-danger",
        # The log-off link is only rendered for a signed-in customer
        "logged_in_indicator": "link_text=Logout",
        "logged_in_indicator_fallback": "partial_link_text=Logout",
        "account_menu": "css=#column-right .list-group",
        "account_menu_link": "tag_name=a",
        "account_links_fallback": "css=.account-section a, .account-area a",
        "account_menu_trigger": "css=.header-account-menu .dropdown-toggle",
        "logout_link": "link_text=Logout",
        "logout_link_fallback": "partial_link_text=Logout",
        "forgot_password_link": "link_text=Forgotten password",
        "forgot_password_link_fallback": "partial_link_text=Forgot",
        "register_link": "link_text=Create your own account",
        "register_link_fallback": "partial_link_text=Create",
        "my_account_link": "link_text=My Account",
        "my_account_link_fallback": "partial_link_text=Account",
        "forgot_password_email_label": "xpath=//label[@for='inputEmail' and contains(text(), 'E-Mail Address')]",
        "forgot_password_email_input": "id=inputEmail",
    },
}


class PageLocators(Mapping):
    """Read-only element-name -> Locator view for one page."""

    def __init__(self, page: str, locators: dict):
        self.page = page
        self._locators = dict(locators)

    def __getitem__(self, name: str) -> Locator:
        try:
            return self._locators[name]
        except KeyError:
            raise MissingLocatorError(f"No locator '{name}' configured for page '{self.page}'") from None

    def __iter__(self):
        return iter(self._locators)

    def __len__(self):
        return len(self._locators)

    def __repr__(self):
        return f"PageLocators({self.page!r}, {len(self)} entries)"


def build_locator_table(overrides: dict = None) -> dict:
    """Parses DEFAULT_LOCATORS merged with ``overrides`` into a page -> PageLocators table."""
    merged = {page: dict(entries) for page, entries in DEFAULT_LOCATORS.items()}

    for page, entries in (overrides or {}).items():
        if page not in merged:
            raise LocatorConfigError(
                f"Unknown page '{page}' in locator overrides. Known pages: {', '.join(merged)}"
            )
        if not isinstance(entries, dict):
            raise LocatorConfigError(f"Locator overrides for page '{page}' must be an object")
        merged[page].update(entries)

    table = {}
    for page, entries in merged.items():
        parsed = {}
        for name, raw in entries.items():
            try:
                parsed[name] = Locator.parse(raw)
            except LocatorConfigError as e:
                raise LocatorConfigError(f"{page}.{name}: {e}") from e
        table[page] = PageLocators(page, parsed)
    return table


def load_locator_overrides(path: str) -> dict:
    """Reads a JSON override file. An empty path means no overrides."""
    if not path:
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            overrides = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise LocatorConfigError(f"Could not read locator overrides from {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise LocatorConfigError(f"Locator overrides in {path} must be a JSON object")
    logger.info(
        "Loaded locator overrides",
        extra={"extra_context": {"path": path, "pages": sorted(overrides)}},
    )
    return overrides


@lru_cache(maxsize=None)
def get_locator_table(path: str = LOCATORS_FILE) -> dict:
    return build_locator_table(load_locator_overrides(path))


def get_page_locators(page: str) -> PageLocators:
    """Locators for ``page`` from the process-wide table."""
    table = get_locator_table()
    try:
        return table[page]
    except KeyError:
        raise MissingLocatorError(f"No locators configured for page '{page}'") from None
