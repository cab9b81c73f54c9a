# elteshop_e2e/page_objects/home_page.py

import logging

from elteshop_e2e.config.config import BASE_URL
from elteshop_e2e.core.exceptions import WaitTimeoutError
from elteshop_e2e.utils.wait_helpers import element_clickable, element_invisible, element_visible

from .base_page import BasePage
from .product_list_page import ProductListPage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Page Object for the shop's home page (header, search box, category menu)."""

    PAGE_NAME = "home"

    def __init__(self, driver, locators=None, wait_policy=None, url: str = BASE_URL):
        super().__init__(driver, locators, wait_policy)
        self.url = url

    def open(self) -> "HomePage":
        """Opens the home page, waits for the logo and dismisses the cookie notice if shown."""
        self.open_url(self.url)
        # The logo defines the page; without it the rest of the test would fail confusingly
        self.verify_loaded(element_visible(self.locators["logo"]))
        self.accept_cookies()
        return self

    def accept_cookies(self) -> "HomePage":
        """Clicks the cookie consent button. A missing banner is not an error."""
        cookie_button = self.locators["cookie_accept"]
        policy = self.optional_wait_policy
        try:
            policy.until(self.driver, element_clickable(cookie_button)).click()
            policy.until(self.driver, element_invisible(cookie_button))
            logger.info("Cookie notice accepted.")
        except WaitTimeoutError:
            logger.info(f"Cookie notice not shown within {policy.timeout}s. Continuing without accepting.")
        return self

    # --- Navigation (each returns the destination page) ---

    def search_product(self, keyword: str) -> ProductListPage:
        self.type(self.locators["search_input"], keyword)
        self.click(self.locators["search_button"])
        logger.info(f"Searched for '{keyword}'")
        return self._product_list()

    def navigate_to_clothes(self) -> ProductListPage:
        self.click(self.locators["clothes_menu"])
        return self._product_list()

    def navigate_to_products(self) -> ProductListPage:
        self.click(self.locators["products_menu"])
        return self._product_list()

    def navigate_to_new(self) -> "HomePage":
        """The "New" top-level link renders with the home page layout."""
        self.click(self.locators["new_menu"])
        return HomePage(self.driver, self.locators, self.wait_policy, url=self.url)

    def _product_list(self) -> ProductListPage:
        return ProductListPage(self.driver, wait_policy=self.wait_policy)

    # --- Queries ---

    def get_navigation_menu_items_count(self) -> int:
        nav_menu = self.wait_visible(self.locators["navigation_menu"])
        return len(nav_menu.find_all(self.locators["navigation_item"]))

    def is_logo_displayed(self) -> bool:
        return self.exists(self.locators["logo"])
