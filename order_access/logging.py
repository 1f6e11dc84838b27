import sys
from loguru import logger
from order_access.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[env]}</magenta> | <cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> "
    "- <level>{message}</level>"
)

class AppLogger:
    """Global logger configuration for the order access client.

    Sets the log level from get_config().log_level and tags every record
    with the running environment.
    """
    def __init__(self) -> None:
        config = get_config()
        logger.remove()
        logger.configure(extra={"env": config.app_env, "component": "order_access"})
        logger.add(
            sink=sys.stderr,
            level=config.log_level.upper(),
            format=LOG_FORMAT,
        )
        self.logger = logger

    def get_logger(self, name: str = None):
        """Get the configured logger instance.

        Args:
            name (str, optional): Component name shown in each record. Defaults to None.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(component=name)
        return self.logger

def get_logger(name: str = None):
    """Get a new application logger using the latest config."""
    return AppLogger().get_logger(name)
