# elteshop_e2e/page_objects/contact_page.py

import logging

from selenium.common.exceptions import WebDriverException

from elteshop_e2e.config.config import CONTACT_URL
from elteshop_e2e.utils.wait_helpers import element_visible

from .base_page import BasePage

logger = logging.getLogger(__name__)


class ContactPage(BasePage):
    """Page Object for the contact form page."""

    PAGE_NAME = "contact"

    def __init__(self, driver, locators=None, wait_policy=None, url: str = CONTACT_URL):
        super().__init__(driver, locators, wait_policy)
        self.url = url

    def open(self) -> "ContactPage":
        self.open_url(self.url)
        self.verify_loaded(element_visible(self.locators["contact_form"]))
        return self

    def fill_contact_form(self, name: str, email: str, enquiry: str) -> "ContactPage":
        self.type(self.locators["name_input"], name)
        self.type(self.locators["email_input"], email)
        self.type(self.locators["enquiry_textarea"], enquiry)
        logger.info("Contact form filled.")
        return self

    def is_gdpr_consent_checkbox_present(self) -> bool:
        return self.exists(self.locators["gdpr_consent_checkbox"])

    def agree_to_gdpr_consent(self) -> "ContactPage":
        self.click(self.locators["gdpr_consent_checkbox"])
        return self

    def click_continue_button(self) -> "ContactPage":
        """Submits the form. Sends a real enquiry on the live site."""
        self.click(self.locators["continue_button"])
        self.wait_for_load()
        return self

    def get_contact_info(self) -> str:
        contact_info = self.locators["contact_info"]
        if self.exists_and_visible(contact_info):
            return self.read_text(contact_info)
        self.soft_failure("Contact info not visible. Returning empty string.", locator=str(contact_info))
        return ""

    def is_success_message_displayed(self) -> bool:
        return self.exists_and_visible(self.locators["success_message"])

    def get_success_message_text(self) -> str:
        if self.is_success_message_displayed():
            return self.read_text(self.locators["success_message"])
        return ""

    def is_continue_button_present_and_visible(self, expected_text: str = "") -> bool:
        """True if the continue button is visible and, when ``expected_text`` is given,
        its text contains it (case-insensitive). Never raises."""
        continue_button = self.locators["continue_button"]
        if not self.exists_and_visible(continue_button):
            self.soft_failure("Continue button not visible", locator=str(continue_button))
            return False

        try:
            actual_text = self.read_text(continue_button)
        except WebDriverException as e:
            self.soft_failure(f"Error reading continue button text: {e.__class__.__name__}")
            return False
        logger.info(f"Actual button text: '{actual_text}'")

        expected = (expected_text or "").strip().lower()
        return not expected or expected in actual_text.lower()
