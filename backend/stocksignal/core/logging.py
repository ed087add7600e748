"""
Logging Setup

Configures the root logger from Settings. Modules log through
logging.getLogger(__name__) and never configure handlers themselves.
"""

import logging
from typing import Optional

from stocksignal.core.config import Settings, get_settings


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging level and format."""
    config = config or get_settings()
    level = logging.DEBUG if config.debug else config.log_level.upper()

    logging.basicConfig(level=level, format=config.log_format, force=True)
    logging.getLogger(__name__).debug(
        f"Logging configured for {config.app_name} ({config.environment})"
    )
