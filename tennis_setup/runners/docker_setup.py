#!/usr/bin/env python3
"""Entry point for the tennis-docker-setup command"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console

from tennis_setup.lib.config import DEFAULT_CONFIG, load_config
from tennis_setup.lib.errors import SetupError
from tennis_setup.lib.helpers.docker import (
    DOCKER_BINARY,
    compose_ps,
    compose_up,
    get_version,
    load_compose_services,
    require_docker,
    resolve_compose_command,
)
from tennis_setup.lib.helpers.file_ops import ensure_data_directory
from tennis_setup.lib.logger import get_logger
from tennis_setup.lib.messages import BANNER, BUILDING, format_ready, format_success_summary
from tennis_setup.lib.runner import ProcessRunner

logger = get_logger(__name__)

console = Console(highlight=False, soft_wrap=True, emoji=False)


def run_setup(
    runner: Optional[ProcessRunner] = None,
    work_dir: Optional[Path] = None,
    config: Optional[Dict[str, Any]] = None,
) -> int:
    """Check prerequisites, build and start the containers, report the outcome.

    Args:
        runner: Process runner for external commands (defaults to a real one)
        work_dir: Directory holding docker-compose.yml and ./data (defaults to cwd)
        config: Settings merged over DEFAULT_CONFIG (defaults to load_config())

    Returns:
        Process exit status: 0 on success, 1 on any failure
    """
    runner = runner or ProcessRunner()
    work_dir = work_dir or Path.cwd()
    config = load_config() if config is None else {**DEFAULT_CONFIG, **config}

    logger.info(f"Starting Docker setup in {work_dir}")
    console.print(BANNER)

    try:
        require_docker(runner)
        console.print("✅ Docker found:")
        console.print(get_version(runner, [DOCKER_BINARY]), markup=False)

        compose = resolve_compose_command(runner, allow_plugin=config["allow_compose_plugin"])
        console.print("✅ Docker Compose found:")
        console.print(get_version(runner, compose), markup=False)
        console.print()

        _, created = ensure_data_directory(work_dir, config["data_dir"])
        if created:
            console.print("📁 Created data directory")

        services = load_compose_services(work_dir / config["compose_file"])
        if services:
            console.print(f"🧩 Services: {', '.join(services)}", markup=False)

        console.print(BUILDING)
        compose_up(runner, compose)
    except SetupError as e:
        logger.error(f"Setup failed: {e.message}")
        console.print(e.message, style="red", markup=False)
        for hint in e.hints:
            console.print(hint, markup=False)
        return 1

    port = config["app_port"]
    console.print(
        format_success_summary(
            data_dir=config["data_dir"],
            port=port,
            compose=" ".join(compose),
            guide_file=config["guide_file"],
        )
    )

    console.print("📊 Container Status:")
    compose_ps(runner, compose)
    console.print()

    console.print(format_ready(port))
    logger.info("Docker setup completed")
    return 0


def main():
    """Run the setup and exit with its status"""
    sys.exit(run_setup())


if __name__ == "__main__":
    main()
