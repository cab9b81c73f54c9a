# elteshop_e2e/page_objects/product_list_page.py

import logging
import re

from elteshop_e2e.utils.locator import Locator
from elteshop_e2e.utils.wait_helpers import any_of, element_clickable, element_visible

from .base_page import BasePage
from .product_detail_page import ProductDetailPage

logger = logging.getLogger(__name__)

# "Showing 1 to 20 of 57 (4 Pages)" -> 57
RESULT_COUNT_PATTERN = re.compile(r"of (\d+)")


def parse_result_count(results_text: str) -> int:
    """Total product count from the listing's results text, or 0 if it can't be found."""
    match = RESULT_COUNT_PATTERN.search(results_text or "")
    if match is None:
        logger.warning(
            "Could not find total product count in results text",
            extra={"extra_context": {"results_text": results_text}},
        )
        return 0
    return int(match.group(1))


class ProductListPage(BasePage):
    """Page Object for search results and category listings."""

    PAGE_NAME = "product_list"

    def __init__(self, driver, locators=None, wait_policy=None):
        super().__init__(driver, locators, wait_policy)
        # Search results show a count bar, category overview pages only a heading
        self.verify_loaded(any_of(
            element_visible(self.locators["results_count"]),
            element_visible(self.locators["page_heading"]),
        ))

    def get_product_count(self) -> int:
        results_count = self.locators["results_count"]
        if not self.exists(results_count):
            self.soft_failure("Results count element not found. Returning 0.", locator=str(results_count))
            return 0

        results_text = self.read_text(results_count)
        logger.info(f"Raw results text: {results_text}")
        return parse_result_count(results_text)

    def get_product_names(self) -> list:
        """Names of all products listed on the current page; empty for pages without product cards."""
        product_items = self.locators["product_items"]
        product_link = self.locators["product_link"]
        if not self.exists(product_items):
            self.soft_failure("No product items found. Returning empty list.", locator=str(product_items))
            return []

        names = []
        for item in self.find_all(product_items):
            links = item.find_all(product_link)
            if not links:
                self.soft_failure("Product card without a name link", locator=str(product_link))
                continue
            names.append(links[0].read_text())
        return names

    def open_product(self, index: int) -> ProductDetailPage:
        """Opens the product at ``index`` (0-based) among the listed products."""
        # Re-find the cards so no stale references are used
        products = self.find_all(self.locators["product_items"])
        if not 0 <= index < len(products):
            raise IndexError(f"Product index {index} out of range. Total products found: {len(products)}")

        links = products[index].find_all(self.locators["product_link"])
        if not links:
            raise IndexError(f"Product {index} has no link to open")
        self.wait_for(element_clickable(links[0].element)).click()
        return ProductDetailPage(self.driver, wait_policy=self.wait_policy)

    def open_product_by_name(self, product_name: str) -> ProductDetailPage:
        self.click(Locator.link_text(product_name))
        return ProductDetailPage(self.driver, wait_policy=self.wait_policy)

    def get_page_heading(self) -> str:
        return self.read_text(self.locators["page_heading"])
