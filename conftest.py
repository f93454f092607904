"""Pytest configuration for the Configuration page suite."""

import logging

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from app import STUB_PASSWORD, STUB_USERNAME, create_app
from config import settings
from logging_config import setup_logging
from pages.login_page import LoginPage
from stub_server import StubServer

pytest_plugins = ["pytester"]

logger = logging.getLogger(__name__)


def pytest_configure(config):
    setup_logging(settings.log_level, settings.log_format)
    config.addinivalue_line("markers", "e2e: test drives a real browser")


@pytest.fixture(autouse=True)
def log_test_boundaries(request):
    logger.info("Starting test", extra={'test_name': request.node.nodeid})
    yield
    logger.info("Finished test", extra={'test_name': request.node.nodeid})


# Stub UI servers
@pytest.fixture(scope="session")
def stub_server_factory():
    """Start stub UI servers on demand; all are stopped at session end."""
    servers = []

    def start(**options) -> StubServer:
        server = StubServer(create_app(**options)).start()
        servers.append(server)
        return server

    yield start

    for server in servers:
        server.stop()


@pytest.fixture(scope="session")
def base_url(pytestconfig, stub_server_factory):
    """Target application: --base-url, then TEST_BASE_URL, then a stub UI matching the configured expectations."""
    cli_base_url = pytestconfig.getoption("base_url", None)
    if cli_base_url:
        return cli_base_url.rstrip("/")
    if settings.base_url:
        return settings.base_url

    server = stub_server_factory(
        expose_config=settings.config_page.expects_table_data,
        forbidden_message=settings.config_page.forbidden_message,
        username=settings.username or STUB_USERNAME,
        password=settings.password or STUB_PASSWORD,
        require_login=settings.has_credentials,
        config_path=settings.config_page.path,
    )
    logger.info(f"No base URL given, targeting stub UI at {server.url}")
    return server.url


@pytest.fixture(scope="session")
def exposed_stub_url(stub_server_factory) -> str:
    return stub_server_factory(expose_config=True).url


@pytest.fixture(scope="session")
def restricted_stub_url(stub_server_factory) -> str:
    return stub_server_factory(expose_config=False).url


@pytest.fixture(scope="session")
def login_stub_url(stub_server_factory) -> str:
    return stub_server_factory(
        username=STUB_USERNAME,
        password=STUB_PASSWORD,
        require_login=True,
    ).url


# Playwright fixtures
@pytest.fixture(scope="session")
def auth_storage_state(browser: Browser, base_url, tmp_path_factory):
    """Log in once per session and share the storage state; None without credentials."""
    if not settings.has_credentials:
        return None

    context = browser.new_context(base_url=base_url)
    try:
        login_page = LoginPage(context.new_page())
        login_page.navigate()
        login_page.login(settings.username, settings.password)
        login_page.expect_logged_in()

        path = tmp_path_factory.mktemp("auth") / "storage_state.json"
        context.storage_state(path=str(path))
    finally:
        context.close()
    return str(path)


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args):
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": browser_type_launch_args.get("headless", True) and settings.headless,
        "args": ["--no-sandbox", "--disable-setuid-sandbox"]
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, base_url, auth_storage_state):
    """Configure browser context."""
    args = {
        **browser_context_args,
        "viewport": {"width": 1280, "height": 720},
        "base_url": base_url,
    }
    if auth_storage_state:
        args["storage_state"] = auth_storage_state
    return args


@pytest.fixture
def page(context: BrowserContext) -> Page:
    """Create a new page for each test."""
    page = context.new_page()
    page.set_default_timeout(settings.default_timeout_ms)
    page.set_default_navigation_timeout(settings.navigation_timeout_ms)
    yield page
    page.close()
