# elteshop_e2e/page_objects/product_detail_page.py

import logging

from elteshop_e2e.utils.wait_helpers import element_visible

from .base_page import BasePage

logger = logging.getLogger(__name__)


class ProductDetailPage(BasePage):
    """Page Object for a single product's page."""

    PAGE_NAME = "product_detail"

    def __init__(self, driver, locators=None, wait_policy=None):
        super().__init__(driver, locators, wait_policy)
        self.verify_loaded(element_visible(self.locators["product_name"]))

    def get_product_name(self) -> str:
        return self.read_text(self.locators["product_name"])

    def set_quantity(self, quantity: int) -> "ProductDetailPage":
        """Sets the quantity field. Products without one are left unchanged."""
        quantity_input = self.locators["quantity_input"]
        if self.exists(quantity_input):
            self.type(quantity_input, str(quantity))
        else:
            self.soft_failure("Quantity field not found", locator=str(quantity_input))
        return self

    def select_option(self, option_index: int, value_index: int) -> "ProductDetailPage":
        """Picks the ``value_index``-th entry of the ``option_index``-th option dropdown."""
        option_select = self.locators["option_select"]
        if self.exists(option_select):
            self.find_all(option_select)[option_index].select_by_index(value_index)
        else:
            self.soft_failure("Option dropdown not found", locator=str(option_select))
        return self

    def select_radio_option(self, option_index: int) -> "ProductDetailPage":
        radio_option = self.locators["radio_option"]
        if self.exists(radio_option):
            radio_button = self.find_all(radio_option)[option_index]
            if not radio_button.is_selected():
                radio_button.click()
        else:
            self.soft_failure("Radio options not found", locator=str(radio_option))
        return self

    def add_to_cart(self) -> "ProductDetailPage":
        self.click(self.locators["add_to_cart_button"])
        logger.info("Clicked add to cart.")
        return self

    def is_add_to_cart_success_displayed(self) -> bool:
        return self.exists_and_visible(self.locators["cart_success"])

    def get_product_description(self) -> str:
        return self._optional_text("description")

    def get_stock_info(self) -> str:
        return self._optional_text("stock_info")

    def _optional_text(self, name: str) -> str:
        locator = self.locators[name]
        # Tab panes stay in the DOM while hidden
        if self.exists_and_visible(locator):
            return self.read_text(locator)
        self.soft_failure(f"{name} not visible. Returning empty string.", locator=str(locator))
        return ""
