# elteshop_e2e/page_objects/base_page.py

import logging

from selenium.webdriver.remote.webdriver import WebDriver

from elteshop_e2e.config.config import OPTIONAL_WAIT_TIMEOUT
from elteshop_e2e.config.locators import PageLocators, get_page_locators
from elteshop_e2e.core.exceptions import PageLoadError, WaitTimeoutError
from elteshop_e2e.utils.element_handle import ElementHandle
from elteshop_e2e.utils.locator import Locator
from elteshop_e2e.utils.wait_helpers import (
    Condition,
    WaitPolicy,
    element_clickable,
    element_present,
    element_visible,
)

logger = logging.getLogger(__name__)

BODY = Locator.tag_name("body")


class BasePage:
    """Base class for all Page Objects.

    Holds the borrowed driver, a WaitPolicy and the page's locators, and offers
    the explicit-wait primitives the concrete pages are composed from.
    Primitives that return a bool (exists, exists_and_visible) never raise;
    everything else raises WaitTimeoutError when its element never reaches
    the required state.
    """

    # Key into the locator table
    PAGE_NAME = None

    def __init__(self, driver: WebDriver, locators: PageLocators = None, wait_policy: WaitPolicy = None):
        self.driver = driver
        self.wait_policy = wait_policy or WaitPolicy()
        if locators is None and self.PAGE_NAME:
            locators = get_page_locators(self.PAGE_NAME)
        self.locators = locators

    @property
    def optional_wait_policy(self) -> WaitPolicy:
        """Shorter policy for elements that may legitimately be missing (cookie banner)."""
        return self.wait_policy.with_timeout(min(OPTIONAL_WAIT_TIMEOUT, self.wait_policy.timeout))

    def _policy(self, timeout: float = None) -> WaitPolicy:
        if timeout is None:
            return self.wait_policy
        return self.wait_policy.with_timeout(timeout)

    def soft_failure(self, message: str, **context):
        """Logs a degraded lookup so a later assertion failure can be traced back to it."""
        logger.warning(
            f"[{self.__class__.__name__}] {message}",
            extra={"extra_context": {"page": self.__class__.__name__, **context}},
        )

    # --- Navigation ---

    def open_url(self, url: str):
        """Navigates to a given URL and waits for the body to render."""
        self.driver.get(url)
        logger.info(f"Navigated to {url}")
        self.wait_for_load()

    def wait_for_load(self):
        """Coarse 'page is not blank' signal: the body element is visible."""
        self.wait_visible(BODY)

    def verify_loaded(self, condition: Condition, timeout: float = None):
        """Waits for the condition defining this page; raises PageLoadError if it never holds."""
        policy = self._policy(timeout)
        try:
            result = policy.until(self.driver, condition)
        except WaitTimeoutError as e:
            logger.error(
                f"{self.__class__.__name__} did not load: {condition}",
                extra={"extra_context": {"page": self.__class__.__name__, "url": self.get_current_url()}},
            )
            raise PageLoadError(self.__class__.__name__, str(condition), policy.timeout) from e
        logger.info(f"{self.__class__.__name__} loaded ({condition})")
        return result

    # --- Waits ---

    def wait_for(self, condition: Condition, timeout: float = None):
        return self._policy(timeout).until(self.driver, condition)

    def wait_visible(self, locator: Locator, timeout: float = None) -> ElementHandle:
        return ElementHandle(self.wait_for(element_visible(locator), timeout))

    def wait_clickable(self, locator: Locator, timeout: float = None) -> ElementHandle:
        return ElementHandle(self.wait_for(element_clickable(locator), timeout))

    # --- Element interaction ---

    def click(self, locator: Locator):
        self.wait_clickable(locator).click()

    def type(self, locator: Locator, text: str):
        """Clears the field and enters ``text``."""
        self.wait_visible(locator).type(text)

    def read_text(self, locator: Locator) -> str:
        return self.wait_visible(locator).read_text()

    def find_all(self, locator: Locator) -> list:
        """All elements currently matching ``locator``; no waiting."""
        return [ElementHandle(e) for e in self.driver.find_elements(*locator)]

    def exists(self, locator: Locator, timeout: float = None) -> bool:
        return self._policy(timeout).holds(self.driver, element_present(locator))

    def exists_and_visible(self, locator: Locator, timeout: float = None) -> bool:
        return self._policy(timeout).holds(self.driver, element_visible(locator))

    def click_first_available(self, locators, label: str) -> bool:
        """Clicks the first of ``locators`` that exists. Logs and returns False when none does."""
        for locator in locators:
            if self.exists(locator):
                self.click(locator)
                return True
        self.soft_failure(f"{label} not found", locators=[str(loc) for loc in locators])
        return False

    # --- Document ---

    def get_page_title(self) -> str:
        return self.driver.title

    def get_current_url(self) -> str:
        return self.driver.current_url

    def get_page_source(self) -> str:
        return self.driver.page_source
