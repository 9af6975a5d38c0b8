"""Page object fixtures built on pytest-playwright's `page` fixture."""
import pytest

from config.settings import UiConfig, load_ui_config
from src.ui.home_page import HomePage
from src.ui.login_page import LoginPage
from src.ui.page_actions import PageActions
from src.ui.secure_page import SecurePage


@pytest.fixture(scope="session")
def ui_config() -> UiConfig:
    return load_ui_config()


@pytest.fixture
def actions(page, ui_config) -> PageActions:
    return PageActions(page, ui_config)


@pytest.fixture
def home_page(actions) -> HomePage:
    home = HomePage(actions)
    home.navigate_to()
    return home


@pytest.fixture
def login_page(actions) -> LoginPage:
    login = LoginPage(actions)
    login.navigate_to()
    return login


@pytest.fixture
def secure_page(actions) -> SecurePage:
    return SecurePage(actions)
