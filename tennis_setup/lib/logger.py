import logging
from pathlib import Path
from datetime import datetime


# Defined here rather than in config so config can import it without a cycle
def get_setup_home() -> Path:
    """Get the directory holding settings and logs (~/.tennis-setup)"""
    return Path.home() / ".tennis-setup"


LOG_DIR = get_setup_home()
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FILE = LOG_DIR / "setup.log"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance writing to the setup log file"""
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid adding duplicate handlers
        logger.setLevel(logging.DEBUG)

        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)

        logger.addHandler(file_handler)

    return logger


logger = get_logger(__name__)
logger.info(f"Logging initialized at {datetime.now()}")
