# elteshop_e2e/core/exceptions.py

"""Exceptions raised by the page-object layer."""

from selenium.common.exceptions import TimeoutException


class ShopTestError(Exception):
    """Base exception for all suite failures."""

    pass


class WaitTimeoutError(ShopTestError, TimeoutException):
    """An explicit wait did not see its condition hold within the timeout.

    Still a selenium ``TimeoutException``, so code written against plain
    selenium waits keeps catching it.
    """

    def __init__(self, condition: str, timeout: float, msg: str = None):
        self.condition = condition
        self.timeout = timeout
        TimeoutException.__init__(
            self, msg or f"Timed out after {timeout}s waiting for {condition}"
        )


class PageLoadError(WaitTimeoutError):
    """The element that defines a page never became visible."""

    def __init__(self, page_name: str, condition: str, timeout: float):
        self.page_name = page_name
        super().__init__(
            condition,
            timeout,
            msg=f"{page_name} did not load correctly: {condition} not satisfied within {timeout}s",
        )


class LocatorConfigError(ShopTestError, ValueError):
    """A locator string or locator table entry is malformed or missing."""

    pass


class MissingLocatorError(LocatorConfigError, KeyError):
    """No locator is configured under the requested page or element name.

    Also a ``KeyError``, so ``in`` and ``.get()`` on a locator mapping behave
    like any other mapping.
    """

    __str__ = Exception.__str__
