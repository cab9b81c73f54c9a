# elteshop_e2e/utils/locator.py

from typing import NamedTuple

from selenium.webdriver.common.by import By

from elteshop_e2e.core.exceptions import LocatorConfigError

# Prefix used in the serialized form ("css=.alert-success") -> selenium strategy
STRATEGIES = {
    "id": By.ID,
    "css": By.CSS_SELECTOR,
    "link_text": By.LINK_TEXT,
    "partial_link_text": By.PARTIAL_LINK_TEXT,
    "xpath": By.XPATH,
    "tag_name": By.TAG_NAME,
}
_PREFIXES = {by: prefix for prefix, by in STRATEGIES.items()}


class Locator(NamedTuple):
    """How to find one or more elements: a selenium (by, value) pair.

    Being a tuple, a Locator can be splatted into ``driver.find_element(*locator)``
    and handed straight to ``expected_conditions``.
    """

    by: str
    value: str

    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def link_text(cls, value: str) -> "Locator":
        return cls(By.LINK_TEXT, value)

    @classmethod
    def partial_link_text(cls, value: str) -> "Locator":
        return cls(By.PARTIAL_LINK_TEXT, value)

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def tag_name(cls, value: str) -> "Locator":
        return cls(By.TAG_NAME, value)

    @classmethod
    def parse(cls, text: str) -> "Locator":
        """Builds a Locator from its serialized ``kind=value`` form."""
        if not isinstance(text, str):
            raise LocatorConfigError(f"Locator must be a string, got {type(text).__name__}")
        kind, sep, value = text.partition("=")
        kind = kind.strip()
        if not sep or not value:
            raise LocatorConfigError(f"Locator '{text}' is not in 'kind=value' form")
        if kind not in STRATEGIES:
            raise LocatorConfigError(
                f"Unknown locator kind '{kind}' in '{text}'. Expected one of: {', '.join(STRATEGIES)}"
            )
        return cls(STRATEGIES[kind], value)

    def serialize(self) -> str:
        return f"{_PREFIXES.get(self.by, self.by)}={self.value}"

    def __str__(self) -> str:
        return self.serialize()
