import sys
from pathlib import Path
from loguru import logger
from i18n_proxy.app.core.config import settings

logger.remove()

LOG_DIR = Path(settings.LOG_DIR) if settings.LOG_DIR else Path(__file__).parent.parent / "logs"

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{extra[component]: <11} | "
    "{name}:{function}:{line} | "
    "{message}"
)

logger.configure(extra={"component": "app"})

if settings.ENVIRONMENT == "development":
    logger.add(sink=sys.stderr, format=LOG_FORMAT, level="INFO", colorize=True)

# Every lookup decision made by the interceptor, kept apart from the app log
logger.add(
    sink=str(LOG_DIR / "translation.log"),
    format=LOG_FORMAT,
    level="DEBUG" if settings.ENVIRONMENT == "development" else "INFO",
    filter=lambda record: record["extra"].get("component") == "translation",
    rotation="10 MB",
    retention="14 days",
    compression="zip",
    enqueue=True,
)

logger.add(
    sink=str(LOG_DIR / "error.log"),
    format=LOG_FORMAT,
    level="ERROR",
    rotation="10 MB",
    retention="30 days",
    compression="zip",
    backtrace=True,
    diagnose=settings.ENVIRONMENT == "development",
    enqueue=True,
)


def get_logger(component: str = "app"):
    return logger.bind(component=component)
