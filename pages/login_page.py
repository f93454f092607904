from typing import Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from config import settings
from exceptions import LoginError
from pages.base_page import BasePage


class LoginPage(BasePage):
    """Form login used to authenticate the browser session before the suite runs."""

    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.get_by_label("Username")
        self.password_input = page.get_by_label("Password")
        self.submit_button = page.get_by_role("button", name="Sign in")
        self.error_message = page.get_by_role("alert")

    def navigate(self, path: str = "/login") -> None:
        self.navigate_to(path)

    def login(self, username: str, password: str) -> None:
        self.logger.info(f"Logging in as {username}")
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.submit_button.click()

    def expect_logged_in(self, timeout: Optional[float] = None) -> None:
        """Raise LoginError unless the home page welcome heading shows up."""
        if timeout is None:
            timeout = settings.navigation_timeout_ms
        try:
            self.welcome_heading.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            detail = ""
            if self.error_message.count() > 0:
                detail = f": {self.error_message.first.text_content().strip()}"
            raise LoginError(f"Login did not reach the home page{detail}") from e
