"""Page object for the demo app home page (list of example links)."""
from typing import List

from src.ui.page_actions import PageActions

# Link text of each example page listed on the home page
EXAMPLE_LINKS = {
    "ab_testing": "A/B Testing",
    "add_remove_elements": "Add/Remove Elements",
    "basic_auth": "Basic Auth",
    "broken_images": "Broken Images",
    "checkboxes": "Checkboxes",
    "context_menu": "Context Menu",
    "digest_auth": "Digest Authentication",
    "drag_and_drop": "Drag and Drop",
    "dropdown": "Dropdown",
    "dynamic_content": "Dynamic Content",
    "dynamic_controls": "Dynamic Controls",
    "file_upload": "File Upload",
    "form_authentication": "Form Authentication",
    "frames": "Frames",
    "hovers": "Hovers",
    "javascript_alerts": "JavaScript Alerts",
    "key_presses": "Key Presses",
    "multiple_windows": "Multiple Windows",
    "nested_frames": "Nested Frames",
    "status_codes": "Status Codes",
}


class HomePage:
    heading = ".heading"
    header = "h2"
    links = "ul a"

    def __init__(self, actions: PageActions):
        self.actions = actions

    def navigate_to(self) -> None:
        self.actions.navigate("/")
        self.actions.wait_for_page_load()

    def get_page_heading(self) -> str:
        return self.actions.get_text(self.heading)

    def get_header_text(self) -> str:
        return self.actions.get_text(self.header)

    def get_available_links(self) -> List[str]:
        """Trimmed, non-empty link texts from the examples list."""
        texts = (text.strip() for text in self.actions.all_text(self.links))
        return [text for text in texts if text]

    def get_example_count(self) -> int:
        return self.actions.count(self.links)

    def click_link_by_text(self, link_text: str) -> None:
        self.actions.click_link(link_text)

    def is_loaded(self) -> bool:
        return self.actions.lookup_visible(self.heading).value_or(False)

    def is_link_present(self, link_text: str) -> bool:
        return self.actions.is_link_visible(link_text)

    def navigate_to_example(self, key: str) -> None:
        """Follow the example link registered under `key` in EXAMPLE_LINKS."""
        self.click_link_by_text(EXAMPLE_LINKS[key])

    def navigate_to_login_page(self) -> None:
        self.navigate_to_example("form_authentication")

    def navigate_to_add_remove_elements(self) -> None:
        self.navigate_to_example("add_remove_elements")

    def navigate_to_checkboxes(self) -> None:
        self.navigate_to_example("checkboxes")

    def navigate_to_dropdown(self) -> None:
        self.navigate_to_example("dropdown")
