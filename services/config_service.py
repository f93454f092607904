from typing import Dict, Optional

from config import DEFAULT_FORBIDDEN_MESSAGE
from schemas import ConfigOption, ConfigResponse, ConfigSection
import logging

logger = logging.getLogger(__name__)

# Subset of an Airflow airflow.cfg as rendered by the UI
DEFAULT_SECTIONS: Dict[str, Dict[str, str]] = {
    "core": {
        "dags_folder": "/opt/airflow/dags",
        "executor": "LocalExecutor",
        "load_examples": "False",
        "parallelism": "32",
    },
    "api": {
        "workers": "4",
        "port": "8080",
    },
    "logging": {
        "base_log_folder": "/opt/airflow/logs",
        "logging_level": "INFO",
    },
    "webserver": {
        "secret_key": "< hidden >",
    },
}


class ConfigNotExposedError(Exception):
    """Configuration is hidden from the UI"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigService:
    """Serves configuration sections to the stub UI, honouring the expose flag"""

    def __init__(
        self,
        sections: Optional[Dict[str, Dict[str, str]]] = None,
        expose_config: bool = True,
        forbidden_message: str = DEFAULT_FORBIDDEN_MESSAGE,
    ):
        self.sections = DEFAULT_SECTIONS if sections is None else sections
        self.expose_config = expose_config
        self.forbidden_message = forbidden_message

    def get_config(self) -> ConfigResponse:
        """Get all sections, raising ConfigNotExposedError when hidden"""
        if not self.expose_config:
            logger.debug("Configuration requested while not exposed")
            raise ConfigNotExposedError(self.forbidden_message)
        return ConfigResponse(sections=[
            ConfigSection(
                name=name,
                options=[ConfigOption(key=key, value=value) for key, value in options.items()],
            )
            for name, options in self.sections.items()
        ])
