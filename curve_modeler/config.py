import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    # --- Logging ---
    LOG_LEVEL = os.getenv("CURVE_MODELER_LOG_LEVEL", "WARNING")

    # --- Athlete Defaults ---
    DEFAULT_SEX = os.getenv("DEFAULT_SEX", "male")

    # --- Chart Sampling ---
    CHART_MAX_DURATION_S = int(os.getenv("CHART_MAX_DURATION_S", "20640"))
    RUNNING_CHART_MAX_DURATION_S = int(os.getenv("RUNNING_CHART_MAX_DURATION_S", "21600"))


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Level name; defaults to Config.LOG_LEVEL

    Returns:
        The configured package logger
    """
    log_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.WARNING)

    package_logger = logging.getLogger("curve_modeler")
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    package_logger.addHandler(handler)
    return package_logger
