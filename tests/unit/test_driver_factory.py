# tests/unit/test_driver_factory.py

from unittest.mock import MagicMock

import pytest

from elteshop_e2e.utils import driver_factory


@pytest.fixture
def mock_webdriver(mocker):
    # Replace the selenium entry points so no browser is started
    remote = mocker.patch.object(driver_factory.webdriver, "Remote", return_value=MagicMock())
    chrome = mocker.patch.object(driver_factory.webdriver, "Chrome", return_value=MagicMock())
    firefox = mocker.patch.object(driver_factory.webdriver, "Firefox", return_value=MagicMock())
    chrome_manager = mocker.patch.object(driver_factory, "ChromeDriverManager")
    chrome_manager.return_value.install.return_value = "/tmp/chromedriver"
    gecko_manager = mocker.patch.object(driver_factory, "GeckoDriverManager")
    gecko_manager.return_value.install.return_value = "/tmp/geckodriver"
    return {"remote": remote, "chrome": chrome, "firefox": firefox}


def test_chrome_options_for_containers():
    options = driver_factory.build_options("chrome", headless=True)
    assert "--no-sandbox" in options.arguments
    assert "--disable-dev-shm-usage" in options.arguments
    assert "--headless=new" in options.arguments


def test_firefox_options_headless_flag():
    assert "-headless" in driver_factory.build_options("firefox", headless=True).arguments
    assert "-headless" not in driver_factory.build_options("firefox", headless=False).arguments


def test_unsupported_browser():
    with pytest.raises(ValueError, match="Unsupported browser: safari"):
        driver_factory.build_options("safari", headless=False)


def test_remote_driver_when_url_given(mock_webdriver):
    driver = driver_factory.create_driver("chrome", "http://selenium:4444/wd/hub", headless=False)

    mock_webdriver["remote"].assert_called_once()
    assert mock_webdriver["remote"].call_args.kwargs["command_executor"] == "http://selenium:4444/wd/hub"
    mock_webdriver["chrome"].assert_not_called()
    driver.maximize_window.assert_called_once()
    driver.set_page_load_timeout.assert_called_once_with(driver_factory.PAGE_LOAD_TIMEOUT)


def test_local_chrome_when_no_remote_url(mock_webdriver):
    driver_factory.create_driver("chrome", "", headless=True)
    mock_webdriver["remote"].assert_not_called()
    mock_webdriver["chrome"].assert_called_once()


def test_local_firefox_when_no_remote_url(mock_webdriver):
    driver_factory.create_driver("firefox", "", headless=True)
    mock_webdriver["firefox"].assert_called_once()
