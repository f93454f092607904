"""Structured logging configuration with JSON output support."""
import logging
import sys
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log records."""
        super().add_fields(log_record, record, message_dict)

        # Add standard fields
        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        # Add contextual fields if present
        if hasattr(record, 'test_name'):
            log_record['test_name'] = record.test_name
        if hasattr(record, 'page_url'):
            log_record['page_url'] = record.page_url
        if hasattr(record, 'locator'):
            log_record['locator'] = record.locator


def setup_logging(log_level: str = "INFO", log_format: str = "standard"):
    """Configure suite logging."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if log_format.lower() == "json":
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(line)s %(message)s'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # uvicorn access lines from the stub UI drown out page-object logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


class PageLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter stamping each record with the current URL of a Playwright page."""

    def __init__(self, logger: logging.Logger, page):
        super().__init__(logger, {'page': page})

    def process(self, msg, kwargs):
        extra = dict(kwargs.get('extra') or {})
        # page.url is tracked client-side, reading it costs no round trip
        extra.setdefault('page_url', self.extra['page'].url)
        kwargs['extra'] = extra
        return msg, kwargs


def get_page_logger(name: str, page) -> PageLoggerAdapter:
    """Get a logger for a page object bound to the given page."""
    return PageLoggerAdapter(logging.getLogger(name), page)
