# tests/conftest.py

import pytest

from elteshop_e2e.config.config import BROWSER
from elteshop_e2e.core import logging_config
from elteshop_e2e.page_objects.base_page import BODY
from elteshop_e2e.utils.driver_factory import create_driver
from elteshop_e2e.utils.wait_helpers import WaitPolicy
from fixtures.fake_webdriver import FakeDriver


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    logging_config.setup_logging()


# --- Live session (e2e tests) ---

@pytest.fixture  # One WebDriver session per test; sessions are never shared
def driver():
    """Provides a WebDriver instance for tests."""
    print(f"\nSetting up WebDriver for browser: {BROWSER}")
    driver = create_driver()

    yield driver

    print("\nQuitting WebDriver.")
    driver.quit()


# --- Offline fakes (unit tests) ---

@pytest.fixture
def fake_driver():
    """A fake session whose document already has a visible body."""
    fake = FakeDriver()
    fake.add(BODY)
    return fake


@pytest.fixture
def fast_wait():
    """Short waits so absent-element checks time out quickly."""
    return WaitPolicy(timeout=0.2, poll_interval=0.01)
