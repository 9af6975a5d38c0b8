"""Page object for the form authentication (login) page."""
import logging
from typing import Optional

from src.ui.page_actions import Lookup, PageActions

logger = logging.getLogger(__name__)


def clean_flash_text(text: str) -> str:
    """Flatten newlines and drop the close glyph from a flash message."""
    return text.replace("\n", " ").replace("×", "").strip()


class LoginPage:
    path = "/login"
    heading = "h2"
    username_input = "#username"
    password_input = "#password"
    login_button = 'button[type="submit"]'
    flash = "#flash"

    def __init__(self, actions: PageActions):
        self.actions = actions

    def navigate_to(self) -> None:
        self.actions.navigate(self.path)
        self.actions.wait_for_page_load()

    def get_page_heading(self) -> str:
        return self.actions.get_text(self.heading)

    def is_login_form_displayed(self) -> bool:
        return (
            self.actions.is_visible(self.username_input)
            and self.actions.is_visible(self.password_input)
            and self.actions.is_visible(self.login_button)
        )

    def enter_username(self, username: str) -> None:
        self.actions.fill(self.username_input, username)

    def enter_password(self, password: str) -> None:
        self.actions.fill(self.password_input, password)

    def click_login_button(self) -> None:
        self.actions.click(self.login_button)

    def login(self, username: str, password: str) -> None:
        logger.info(f"Logging in as '{username}'")
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    def perform_login(self, username: str, password: str) -> None:
        """Log in and wait for the resulting page to settle."""
        self.login(username, password)
        self.actions.wait_for_page_load()

    def flash_message(self) -> Lookup[str]:
        lookup = self.actions.lookup_text(self.flash)
        if lookup.found:
            return Lookup.hit(clean_flash_text(lookup.value))
        return lookup

    def is_flash_message_displayed(self) -> bool:
        return self.actions.lookup_visible(self.flash).value_or(False)

    def is_loaded(self) -> bool:
        return self.actions.lookup_visible(self.heading).value_or(False)

    def get_username_placeholder(self) -> Optional[str]:
        return self.actions.attribute(self.username_input, "placeholder")

    def get_password_placeholder(self) -> Optional[str]:
        return self.actions.attribute(self.password_input, "placeholder")

    def get_username_value(self) -> str:
        return self.actions.input_value(self.username_input)

    def get_password_value(self) -> str:
        return self.actions.input_value(self.password_input)

    def clear_username(self) -> None:
        self.actions.fill(self.username_input, "")

    def clear_password(self) -> None:
        self.actions.fill(self.password_input, "")

    def is_login_button_enabled(self) -> bool:
        return self.actions.is_enabled(self.login_button)
