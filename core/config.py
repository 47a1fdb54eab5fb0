"""Runtime configuration read from environment variables.

Only the logging layer is configurable; the calculation core has no
settings.
"""

import logging
import os

from core.exceptions import ConfigurationError

LOG_DIR = os.getenv(
    "MACROMIND_LOG_DIR",
    os.path.join(os.path.dirname(__file__), "..", "logs"),
)
LOG_LEVEL = os.getenv("MACROMIND_LOG_LEVEL", "INFO")


def resolve_log_level(name: str = LOG_LEVEL) -> int:
    """Translate a level name such as ``"DEBUG"`` into its logging constant.

    Raises:
        ConfigurationError: If the name is not a standard logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level '{name}'", config_key="MACROMIND_LOG_LEVEL"
        )
    return level
