"""Helpers for matching configured text against rendered pages."""
import re

# $()*+.?[\]^{|} and backslash
_REGEX_METACHARACTERS = re.compile(r"[\\$()*+.?\[\]^{|}]")


def escape_for_regex(value: str) -> str:
    """Backslash-escape regex metacharacters so ``value`` matches only itself."""
    return _REGEX_METACHARACTERS.sub(r"\\\g<0>", value)


def literal_pattern(value: str) -> "re.Pattern[str]":
    """Case-insensitive pattern matching ``value`` literally, for ``get_by_text`` and ``expect``."""
    return re.compile(escape_for_regex(value), re.IGNORECASE)
