"""Rich-handler logging preset."""
import logging
from rich.logging import RichHandler
from smarthome.core.exceptions import ConfigurationError
from .app_config import settings

def configure():
    level = getattr(logging, settings.LOG_LEVEL, None)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {settings.LOG_LEVEL}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s │ %(name)-28s │ %(levelname)-8s │ %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )
