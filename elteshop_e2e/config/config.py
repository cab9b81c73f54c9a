# elteshop_e2e/config/config.py

import os

from dotenv import load_dotenv

# .env values never override variables already set in the environment
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# --- Target site ---
# Base URL of the shop under test (keep the trailing slash)
BASE_URL = os.getenv("BASE_URL", "https://elteshop.com/")

LOGIN_PATH = os.getenv("LOGIN_PATH", "customer/login")
CONTACT_PATH = os.getenv("CONTACT_PATH", "index.php?route=information/contact")

LOGIN_URL = BASE_URL + LOGIN_PATH
CONTACT_URL = BASE_URL + CONTACT_PATH

# Optional JSON file overriding entries of locators.DEFAULT_LOCATORS
LOCATORS_FILE = os.getenv("LOCATORS_FILE", "")


# --- Browser / session ---
# Browser type to use for testing (chrome, firefox)
BROWSER = os.getenv("BROWSER", "chrome").lower()
HEADLESS = _env_bool("HEADLESS", False)

# Selenium Grid / standalone hub. Empty string means a local driver via webdriver_manager.
SELENIUM_REMOTE_URL = os.getenv("SELENIUM_REMOTE_URL", "http://selenium:4444/wd/hub")

# Page load timeout for driver.get (seconds)
PAGE_LOAD_TIMEOUT = int(os.getenv("PAGE_LOAD_TIMEOUT", "30"))


# --- Explicit waits (seconds) ---
DEFAULT_WAIT_TIMEOUT = float(os.getenv("DEFAULT_WAIT_TIMEOUT", "10"))
# Used for optional, non-critical elements (cookie banner) so a missing one doesn't stall a test
OPTIONAL_WAIT_TIMEOUT = float(os.getenv("OPTIONAL_WAIT_TIMEOUT", "5"))
POLL_INTERVAL = float(os.getenv("POLL_INTERVAL", "0.5"))


# --- Test data ---
SEARCH_KEYWORD = os.getenv("SEARCH_KEYWORD", "gloves")

# Real account for the login/logout scenario. The scenario is skipped when unset.
TEST_USER_EMAIL = os.getenv("TEST_USER_EMAIL", "")
TEST_USER_PASSWORD = os.getenv("TEST_USER_PASSWORD", "")
