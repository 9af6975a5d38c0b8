"""Browser action primitives shared by all page objects."""
import logging
from enum import Enum
from typing import Generic, List, Optional, TypeVar
from urllib.parse import urljoin, urlparse
from pydantic import BaseModel
from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from config.settings import UiConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMED_OUT = "timed_out"


class Lookup(BaseModel, Generic[T]):
    """Outcome of a UI lookup that may legitimately miss."""
    status: LookupStatus
    value: Optional[T] = None
    detail: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND

    def value_or(self, default: T) -> T:
        return self.value if self.found else default

    @classmethod
    def hit(cls, value: T) -> "Lookup[T]":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def missing(cls, detail: str) -> "Lookup[T]":
        return cls(status=LookupStatus.NOT_FOUND, detail=detail)

    @classmethod
    def timed_out(cls, detail: str) -> "Lookup[T]":
        return cls(status=LookupStatus.TIMED_OUT, detail=detail)


class PageActions:
    """
    Selector and navigation primitives over a Playwright page.

    Page objects receive one instance and build their named actions from it.
    """

    def __init__(self, page: Page, config: UiConfig):
        self.page = page
        self.config = config

    def url_for(self, path: str) -> str:
        return urljoin(self.config.base_url.rstrip("/") + "/", path.lstrip("/"))

    def navigate(self, path: str = "/") -> None:
        url = self.url_for(path)
        logger.info(f"Navigating to {url}")
        self.page.goto(url)

    def wait_for_page_load(self) -> None:
        self.page.wait_for_load_state("networkidle")

    def title(self) -> str:
        return self.page.title()

    def fill(self, selector: str, text: str) -> None:
        self.page.fill(selector, text)

    def click(self, selector: str) -> None:
        self.page.click(selector)

    def get_text(self, selector: str) -> str:
        return self.page.text_content(selector) or ""

    def is_visible(self, selector: str) -> bool:
        return self.page.is_visible(selector)

    def wait_for(self, selector: str, timeout: Optional[int] = None, state: str = "visible") -> None:
        """Wait for selector to reach `state`; raises PlaywrightTimeoutError."""
        timeout = self.config.timeout_ms if timeout is None else timeout
        self.page.wait_for_selector(selector, timeout=timeout, state=state)

    def exists(self, selector: str) -> bool:
        return self.page.query_selector(selector) is not None

    def all_text(self, selector: str) -> List[str]:
        return self.page.locator(selector).all_text_contents()

    def count(self, selector: str) -> int:
        return self.page.locator(selector).count()

    def is_enabled(self, selector: str) -> bool:
        element = self.page.query_selector(selector)
        if element is None:
            return False
        return element.is_enabled()

    def input_value(self, selector: str) -> str:
        return self.page.input_value(selector)

    def attribute(self, selector: str, name: str) -> Optional[str]:
        return self.page.get_attribute(selector, name)

    def current_url(self) -> str:
        return self.page.url

    def current_path(self) -> str:
        return urlparse(self.page.url).path

    def wait_for_url(self, fragment: str, timeout: Optional[int] = None) -> None:
        timeout = self.config.timeout_ms if timeout is None else timeout
        self.page.wait_for_url(f"**/*{fragment}*", timeout=timeout)

    def click_link(self, link_text: str) -> None:
        self.page.get_by_role("link", name=link_text).click()

    def is_link_visible(self, link_text: str) -> bool:
        return self.page.get_by_role("link", name=link_text).is_visible()

    def _await_visible(self, selector: str, timeout: Optional[int]) -> Optional[Lookup]:
        """None once visible; otherwise NOT_FOUND (never attached) or TIMED_OUT (attached, not visible)."""
        try:
            self.wait_for(selector, timeout, state="attached")
        except PlaywrightTimeoutError:
            logger.debug(f"{selector} never attached")
            return Lookup.missing(f"{selector} not in page")
        try:
            self.wait_for(selector, timeout)
        except PlaywrightTimeoutError:
            logger.debug(f"Timed out waiting for {selector} to be visible")
            return Lookup.timed_out(f"{selector} not visible within timeout")
        return None

    def lookup_text(self, selector: str, timeout: Optional[int] = None) -> Lookup[str]:
        """Wait for selector and read its text, reporting a miss instead of raising."""
        miss = self._await_visible(selector, timeout)
        if miss is not None:
            return miss
        return Lookup.hit(self.get_text(selector))

    def lookup_visible(self, selector: str, timeout: Optional[int] = None) -> Lookup[bool]:
        miss = self._await_visible(selector, timeout)
        if miss is not None:
            return miss
        return Lookup.hit(self.is_visible(selector))
