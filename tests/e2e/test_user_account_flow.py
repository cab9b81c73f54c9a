# tests/e2e/test_user_account_flow.py

import pytest
from selenium.webdriver.remote.webdriver import WebDriver

from elteshop_e2e.config.config import TEST_USER_EMAIL, TEST_USER_PASSWORD
from elteshop_e2e.page_objects.user_account_page import LOGIN_ERROR_TEXT, UserAccountPage

pytestmark = pytest.mark.e2e


def test_login_page_rejects_invalid_credentials(driver: WebDriver):
    account_page = UserAccountPage(driver).open()

    page_title = account_page.get_page_title()
    page_source = account_page.get_page_source()
    assert any(text in page_title for text in ("Account", "Login", "ELTE")) \
        or any(text in page_source for text in ("Login", "E-mail", "Password")), \
        "Page should contain login-related content"

    account_page.login("test@example.com", "password123")

    assert account_page.is_login_error_displayed(), \
        f"Should display '{LOGIN_ERROR_TEXT}' with fake credentials"


@pytest.mark.skipif(not (TEST_USER_EMAIL and TEST_USER_PASSWORD),
                    reason="TEST_USER_EMAIL / TEST_USER_PASSWORD not set")
def test_login_and_logout(driver: WebDriver):
    account_page = UserAccountPage(driver).open()

    account_page.login(TEST_USER_EMAIL, TEST_USER_PASSWORD)
    assert account_page.is_logged_in(), "Logout link should be present after login"

    account_page.open_account_menu().logout()
    assert account_page.is_login_header_visible(), "Login page header should be visible after logout"


def test_account_menu(driver: WebDriver):
    account_page = UserAccountPage(driver).open()

    # Logged out the menu may be missing; only the count is reported
    menu_item_count = account_page.get_account_menu_item_count()
    print(f"Account menu has {menu_item_count} items")
    assert menu_item_count >= 0


def test_forgot_password(driver: WebDriver):
    account_page = UserAccountPage(driver).open()

    account_page.click_forgot_password()

    assert account_page.is_forgot_password_page_loaded() \
        or "forgotten" in account_page.get_current_url() \
        or "E-Mail Address" in account_page.get_page_source(), \
        "Should navigate to forgot password page"
