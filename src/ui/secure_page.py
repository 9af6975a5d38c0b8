"""Page object for the secure area shown after a successful login."""
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from src.ui.login_page import clean_flash_text
from src.ui.page_actions import Lookup, PageActions


class SecurePage:
    path = "/secure"
    heading = "h2"
    sub_heading = "h4"
    flash = "#flash"
    logout_link = 'a[href="/logout"]'

    def __init__(self, actions: PageActions):
        self.actions = actions

    def navigate_to(self) -> None:
        self.actions.navigate(self.path)
        self.actions.wait_for_page_load()

    def is_loaded(self) -> bool:
        return self.actions.lookup_visible(self.heading).value_or(False)

    def heading_text(self) -> Lookup[str]:
        return self.actions.lookup_text(self.heading)

    def sub_heading_text(self) -> Lookup[str]:
        return self.actions.lookup_text(self.sub_heading)

    def flash_message(self) -> Lookup[str]:
        lookup = self.actions.lookup_text(self.flash)
        if lookup.found:
            return Lookup.hit(clean_flash_text(lookup.value))
        return lookup

    def click_logout(self) -> Lookup[bool]:
        """Click logout if the link shows up; reports a miss otherwise."""
        visible = self.actions.lookup_visible(self.logout_link)
        if not visible.found:
            return visible
        self.actions.click(self.logout_link)
        self.actions.wait_for_page_load()
        return Lookup.hit(True)

    def is_logout_button_visible(self) -> bool:
        return self.actions.is_visible(self.logout_link)

    def is_redirected_to_login(self) -> bool:
        try:
            self.actions.wait_for_url("/login")
        except PlaywrightTimeoutError:
            return False
        return "/login" in self.actions.current_url()

    def current_path(self) -> str:
        return self.actions.current_path()
