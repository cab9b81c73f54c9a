# tests/unit/test_locator.py

import pytest
from selenium.webdriver.common.by import By

from elteshop_e2e.core.exceptions import LocatorConfigError
from elteshop_e2e.utils.locator import Locator


def test_constructors_map_to_selenium_strategies():
    assert Locator.id("input-quantity") == (By.ID, "input-quantity")
    assert Locator.css(".alert-success") == (By.CSS_SELECTOR, ".alert-success")
    assert Locator.link_text("Logout") == (By.LINK_TEXT, "Logout")
    assert Locator.partial_link_text("Forgot") == (By.PARTIAL_LINK_TEXT, "Forgot")
    assert Locator.xpath("//h1") == (By.XPATH, "//h1")
    assert Locator.tag_name("li") == (By.TAG_NAME, "li")


def test_locator_is_structurally_equal_and_hashable():
    assert Locator.id("email_login") == Locator.id("email_login")
    assert len({Locator.id("a"), Locator.id("a"), Locator.css("a")}) == 2


def test_parse_keeps_equals_signs_inside_the_value():
    locator = Locator.parse("xpath=//input[@placeholder='Keywords']")
    assert locator == Locator.xpath("//input[@placeholder='Keywords']")


def test_serialize_parse_inverse():
    locator = Locator.css("a[title='Shopping Cart']")
    assert locator.serialize() == "css=a[title='Shopping Cart']"
    assert Locator.parse(str(locator)) == locator


@pytest.mark.parametrize("text", ["no-separator", "css=", "shadow=#host", "=value"])
def test_parse_rejects_malformed_strings(text):
    with pytest.raises(LocatorConfigError):
        Locator.parse(text)


def test_parse_rejects_non_strings():
    with pytest.raises(LocatorConfigError):
        Locator.parse(42)


def test_locator_can_be_splatted_into_find_element(fake_driver):
    element = fake_driver.add(Locator.id("contact"))
    assert fake_driver.find_element(*Locator.id("contact")) is element
