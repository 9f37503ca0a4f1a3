import logging

from .config import ConfigError, Settings, configure_logging
from .main import run as _run

log = logging.getLogger(__name__)


def run() -> int:
    """Entry point for the scrobblez command."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        configure_logging("INFO")
        log.error("%s", e)
        return 1
    configure_logging(settings.log_level)
    return _run(settings)
