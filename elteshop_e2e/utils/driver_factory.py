# elteshop_e2e/utils/driver_factory.py

import logging

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from elteshop_e2e.config.config import BROWSER, HEADLESS, PAGE_LOAD_TIMEOUT, SELENIUM_REMOTE_URL

logger = logging.getLogger(__name__)


def build_options(browser: str = BROWSER, headless: bool = HEADLESS):
    """Browser options that keep Chrome stable inside containers."""
    if browser == "chrome":
        options = webdriver.ChromeOptions()
        options.add_argument("--no-sandbox")  # Needed in Docker
        options.add_argument("--disable-dev-shm-usage")  # Limited /dev/shm in containers
        if headless:
            options.add_argument("--headless=new")
    elif browser == "firefox":
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
    else:
        raise ValueError(f"Unsupported browser: {browser}")
    return options


def create_driver(browser: str = BROWSER, remote_url: str = SELENIUM_REMOTE_URL, headless: bool = HEADLESS):
    """Starts one WebDriver session: remote when ``remote_url`` is set, otherwise a local driver."""
    options = build_options(browser, headless)

    if remote_url:
        logger.info(f"Connecting to remote WebDriver at {remote_url} ({browser})")
        driver = webdriver.Remote(command_executor=remote_url, options=options)
    elif browser == "chrome":
        # Automatically download and manage ChromeDriver
        service = ChromeService(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=options)
    else:
        service = FirefoxService(GeckoDriverManager().install())
        driver = webdriver.Firefox(service=service, options=options)

    driver.set_page_load_timeout(PAGE_LOAD_TIMEOUT)
    driver.maximize_window()
    return driver
