import re

from playwright.sync_api import Locator, Page

from logging_config import get_page_logger


class BasePage:
    """Shared navigation for page objects.

    Locators are built once in ``__init__`` and resolved by Playwright on every
    use, so they always reflect the live page.
    """

    def __init__(self, page: Page):
        self.page = page
        self.welcome_heading: Locator = page.get_by_role("heading", name=re.compile(r"welcome", re.IGNORECASE))
        self.logger = get_page_logger(type(self).__module__, page)

    def navigate_to(self, path: str) -> None:
        """Go to ``path``, resolved against the context base URL."""
        self.logger.info(f"Navigating to {path}")
        self.page.goto(path)

    def is_logged_in(self) -> bool:
        return self.welcome_heading.is_visible()
