"""Page objects for the demo web app."""
from src.ui.page_actions import Lookup, LookupStatus, PageActions
from src.ui.home_page import HomePage
from src.ui.login_page import LoginPage
from src.ui.secure_page import SecurePage

__all__ = ["Lookup", "LookupStatus", "PageActions", "HomePage", "LoginPage", "SecurePage"]
