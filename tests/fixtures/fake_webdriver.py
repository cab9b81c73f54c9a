# tests/fixtures/fake_webdriver.py

"""In-memory stand-ins for a WebDriver session.

Elements subclass selenium's WebElement so expected_conditions treat them as
real elements. The DOM is a flat locator -> [elements] map; tests add and
remove entries to simulate the page changing.
"""

import uuid

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement


def _key(by, value):
    return (by, value)


class FakeElement(WebElement):
    def __init__(self, text="", displayed=True, enabled=True, selected=False,
                 tag_name="div", attributes=None, on_click=None):
        super().__init__(None, uuid.uuid4().hex)
        self._text = text
        self._tag_name = tag_name
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.attributes = dict(attributes or {})
        self.on_click = on_click
        self.value = ""
        self.clicks = 0
        self.children = {}

    def __repr__(self):
        return f"<FakeElement {self._tag_name} text={self._text!r}>"

    # --- Fake DOM ---

    def add_child(self, locator, *elements):
        self.children.setdefault(_key(*locator), []).extend(elements)
        return self

    # --- WebElement API used by the suite ---

    @property
    def text(self):
        return self._text

    @property
    def tag_name(self):
        return self._tag_name

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        return self.enabled

    def is_selected(self):
        return self.selected

    def click(self):
        self.clicks += 1
        if self._tag_name in ("option", "input"):
            self.selected = True
        if self.on_click is not None:
            self.on_click()

    def clear(self):
        self.value = ""

    def send_keys(self, *value):
        self.value += "".join(str(v) for v in value)

    def get_attribute(self, name):
        if name == "value":
            return self.value
        return self.attributes.get(name)

    def get_dom_attribute(self, name):
        return self.attributes.get(name)

    def get_property(self, name):
        return self.attributes.get(name)

    def find_element(self, by="id", value=None):
        found = self.children.get(_key(by, value))
        if not found:
            raise NoSuchElementException(f"No child element for {by}={value}")
        return found[0]

    def find_elements(self, by="id", value=None):
        return list(self.children.get(_key(by, value), []))


class FakeDriver:
    session_id = "fake-session"

    def __init__(self):
        self.elements = {}
        self.title = ""
        self.current_url = "about:blank"
        self.page_source = "<html><body></body></html>"
        self.visited = []
        # url -> callable(driver) run on get(url) to "render" that page
        self.pages = {}
        self.quit_called = False

    def add(self, locator, *elements):
        """Puts ``elements`` (default: one visible element) under ``locator``; returns the first."""
        if not elements:
            elements = (FakeElement(),)
        self.elements.setdefault(_key(*locator), []).extend(elements)
        return elements[0]

    def remove(self, locator):
        self.elements.pop(_key(*locator), None)

    def find_element(self, by="id", value=None):
        found = self.elements.get(_key(by, value))
        if not found:
            raise NoSuchElementException(f"No element for {by}={value}")
        return found[0]

    def find_elements(self, by="id", value=None):
        return list(self.elements.get(_key(by, value), []))

    def get(self, url):
        self.current_url = url
        self.visited.append(url)
        render = self.pages.get(url)
        if render is not None:
            render(self)

    def quit(self):
        self.quit_called = True
