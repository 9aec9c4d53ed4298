"""Global configuration for the setup tool"""

import json
from typing import Any, Dict

from .logger import get_logger, get_setup_home

logger = get_logger(__name__)

DEFAULT_CONFIG = {
    "data_dir": "data",
    "compose_file": "docker-compose.yml",
    "app_port": 3001,
    "guide_file": "DOCKER_GUIDE.md",
    "allow_compose_plugin": False,
}

CONFIG_FILE = get_setup_home() / "config" / "settings.json"


def load_config() -> Dict[str, Any]:
    """Load global configuration, falling back to defaults"""
    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, "r") as f:
                config = json.load(f)
            if isinstance(config, dict):
                return {**DEFAULT_CONFIG, **config}
            logger.warning(f"Settings file {CONFIG_FILE} is not a JSON object, using defaults")
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable settings file {CONFIG_FILE}: {e}")

    return DEFAULT_CONFIG.copy()


def save_config(config: Dict[str, Any]) -> None:
    """Save global configuration"""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)
