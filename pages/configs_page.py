"""Page object for the admin Configuration page."""
import re
import time
from typing import List, Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from config import settings
from exceptions import PageLoadTimeoutError
from pages.base_page import BasePage
from schemas import ConfigRow

TABLE_TEST_ID = "table-list"
FORBIDDEN_MARKER = "403 Forbidden"

# Either terminal state: the table is mounted, or the forbidden banner is rendered
_TERMINAL_STATE_JS = """
([testId, marker]) => {
    const table = document.querySelector(`[data-testid="${testId}"]`);
    const bodyText = document.body ? document.body.textContent : "";
    return table !== null || bodyText.includes(marker);
}
"""

_ROW_CELLS_JS = """
rows => rows.map(row => Array.from(row.querySelectorAll("td")).map(cell => cell.textContent))
"""


class ConfigsPage(BasePage):
    """Configuration page: heading, config table and the 403 rendering."""

    def __init__(self, page: Page):
        super().__init__(page)
        self.heading = page.get_by_role("heading", name=re.compile(r"configuration", re.IGNORECASE))
        self.table = page.get_by_test_id(TABLE_TEST_ID)
        self.forbidden_status = page.get_by_text(re.compile(r"403 forbidden", re.IGNORECASE))
        # Placeholder rows (loading or empty states) carry no data cells
        self.rows = self.table.locator("tbody tr").filter(has=page.locator("td"))

    def navigate(self, path: str = "/configs") -> None:
        self.navigate_to(path)

    def wait_for_load(self, timeout: Optional[float] = None) -> None:
        """Block until the page shows either the config table or the 403 rendering.

        The heading wait and the terminal-state wait share one deadline, so the
        whole call is bounded by ``timeout``.

        Raises:
            PageLoadTimeoutError: the heading or a terminal state did not show up
                within ``timeout`` milliseconds (default ``settings.load_timeout_ms``).
        """
        if timeout is None:
            timeout = settings.load_timeout_ms
        deadline = time.monotonic() + timeout / 1000

        try:
            self.heading.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise PageLoadTimeoutError("the configuration heading to become visible", timeout) from e

        # Playwright treats 0 as "no timeout"
        remaining_ms = max((deadline - time.monotonic()) * 1000, 1)
        try:
            self.page.wait_for_function(
                _TERMINAL_STATE_JS,
                arg=[TABLE_TEST_ID, FORBIDDEN_MARKER],
                timeout=remaining_ms,
            )
        except PlaywrightTimeoutError as e:
            raise PageLoadTimeoutError(
                f"the configuration table or a '{FORBIDDEN_MARKER}' message", timeout
            ) from e

        self.logger.info("Configuration page loaded", extra={'locator': TABLE_TEST_ID})

    def is_forbidden(self) -> bool:
        return self.forbidden_status.count() > 0

    def get_column_names(self) -> List[str]:
        return [name.strip() for name in self.table.locator("thead th").all_text_contents()]

    def get_row_count(self) -> int:
        return self.rows.count()

    def get_row_details(self, index: int) -> ConfigRow:
        """Read section, key and value from the data row at ``index`` (0-based)."""
        row_count = self.get_row_count()
        if index < 0 or index >= row_count:
            raise IndexError(f"Row {index} out of range, table has {row_count} data rows")

        cells = self.rows.nth(index).locator("td").all_text_contents()
        return ConfigRow.from_cells(cells)

    def get_all_rows(self) -> List[ConfigRow]:
        """Read every data row in a single round trip."""
        rows = [ConfigRow.from_cells(cells) for cells in self.rows.evaluate_all(_ROW_CELLS_JS)]
        self.logger.debug(f"Read {len(rows)} configuration rows")
        return rows

    def has_section_and_key(self, section: str, key: str) -> bool:
        return any(row.matches(section, key) for row in self.get_all_rows())
