import os
import sys

from loguru import logger

from config.settings import settings


def setup_logger(
    *,
    json_logs: bool | None = None,
    level: str | None = None,
    log_dir: str | None = None,
) -> None:
    """Configure loguru for the application.

    Console level controlled by LOG_LEVEL env (default: settings.log_level).
    File always captures DEBUG so rejected account data can be inspected later.
    """
    if json_logs is None:
        json_logs = settings.json_logs
    console_level = os.getenv("LOG_LEVEL", level or settings.log_level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    logger.add(
        os.path.join(log_dir or settings.log_dir, "pumpfun_{time:YYYY-MM-DD}.log"),
        rotation="50 MB",
        retention="3 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
