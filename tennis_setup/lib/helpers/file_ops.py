"""File and directory utilities"""

from pathlib import Path

from ..errors import PreflightError
from ..logger import get_logger

logger = get_logger(__name__)


def ensure_data_directory(base_dir: Path, name: str = "data") -> tuple[Path, bool]:
    """Ensure the persistence directory exists under base_dir.

    Safe to call repeatedly; an existing directory is left untouched.

    Args:
        base_dir: Directory the data directory lives in (usually the cwd)
        name: Name of the data directory

    Returns:
        Tuple of (data_dir_path, created) where created is True only if the
        directory did not exist before this call

    Raises:
        PreflightError: If the path exists but is not a directory
    """
    data_dir = base_dir / name

    if data_dir.is_dir():
        return data_dir, False

    if data_dir.exists():
        logger.error(f"{data_dir} exists but is not a directory")
        raise PreflightError(
            f"❌ {data_dir} exists but is not a directory.",
            ["Move or remove it, then run this script again."],
        )

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create {data_dir}: {e}")
        raise PreflightError(
            f"❌ Could not create {data_dir}: {e}",
            ["Check the path and its permissions, then run this script again."],
        ) from e
    logger.info(f"Created data directory at {data_dir}")
    return data_dir, True
