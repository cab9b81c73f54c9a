# elteshop_e2e/utils/wait_helpers.py

import logging
from dataclasses import dataclass, replace

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from elteshop_e2e.config.config import DEFAULT_WAIT_TIMEOUT, POLL_INTERVAL
from elteshop_e2e.core.exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)


class Condition:
    """An expected condition plus a readable description for timeout messages."""

    def __init__(self, description: str, predicate):
        self.description = description
        self.predicate = predicate

    def __call__(self, driver):
        return self.predicate(driver)

    def __str__(self):
        return self.description

    def __repr__(self):
        return f"Condition({self.description!r})"


# --- Conditions ---

def element_present(locator) -> Condition:
    """Element is attached to the DOM (not necessarily visible)."""
    return Condition(f"presence of {locator}", EC.presence_of_element_located(locator))


def element_visible(locator) -> Condition:
    """Element is present, displayed and has a non-zero size."""
    return Condition(f"visibility of {locator}", EC.visibility_of_element_located(locator))


def element_clickable(mark) -> Condition:
    """Element is visible and enabled. Accepts a locator or an already found WebElement."""
    return Condition(f"clickability of {mark}", EC.element_to_be_clickable(mark))


def element_invisible(locator) -> Condition:
    """Element is hidden or gone from the DOM."""
    return Condition(f"invisibility of {locator}", EC.invisibility_of_element_located(locator))


def title_contains(text: str) -> Condition:
    return Condition(f"title containing '{text}'", EC.title_contains(text))


def any_of(*conditions: Condition) -> Condition:
    """Holds as soon as any of ``conditions`` holds; returns that condition's value."""
    description = " or ".join(str(c) for c in conditions)
    return Condition(f"({description})", EC.any_of(*conditions))


# --- Policy ---

@dataclass(frozen=True)
class WaitPolicy:
    """Polls a condition every ``poll_interval`` seconds for at most ``timeout`` seconds."""

    timeout: float = DEFAULT_WAIT_TIMEOUT
    poll_interval: float = POLL_INTERVAL

    def with_timeout(self, timeout: float) -> "WaitPolicy":
        return replace(self, timeout=timeout)

    def until(self, driver: WebDriver, condition: Condition):
        """Returns the condition's first truthy value; raises WaitTimeoutError on timeout."""
        wait = WebDriverWait(driver, self.timeout, poll_frequency=self.poll_interval)
        try:
            return wait.until(condition)
        except TimeoutException as e:
            logger.debug(f"Timeout after {self.timeout}s waiting for {condition}")
            raise WaitTimeoutError(str(condition), self.timeout) from e

    def holds(self, driver: WebDriver, condition: Condition) -> bool:
        """Like until(), but reports failure as False instead of raising."""
        try:
            self.until(driver, condition)
            return True
        except WebDriverException as e:
            logger.debug(f"Condition {condition} did not hold: {e.__class__.__name__}")
            return False
