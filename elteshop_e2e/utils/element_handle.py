# elteshop_e2e/utils/element_handle.py

from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select


class ElementHandle:
    """Thin facade over a selenium WebElement returned by the page-object waits."""

    def __init__(self, element: WebElement):
        self.element = element

    def click(self):
        self.element.click()

    def type(self, text: str):
        """Replaces the field's content with ``text``."""
        self.element.clear()
        self.element.send_keys(text)

    def read_text(self) -> str:
        return (self.element.text or "").strip()

    def is_selected(self) -> bool:
        return self.element.is_selected()

    def is_displayed(self) -> bool:
        return self.element.is_displayed()

    def get_attribute(self, name: str):
        return self.element.get_attribute(name)

    def select_by_index(self, index: int):
        Select(self.element).select_by_index(index)

    def find_all(self, locator) -> list:
        """Child elements matching ``locator``, without waiting."""
        return [ElementHandle(child) for child in self.element.find_elements(*locator)]

    def __repr__(self):
        return f"ElementHandle({self.element.__class__.__name__})"
