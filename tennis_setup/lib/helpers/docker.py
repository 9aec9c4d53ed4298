"""Docker and Docker Compose utilities"""

from pathlib import Path
from typing import Dict, List

import yaml

from ..errors import ComposeError, PreflightError
from ..logger import get_logger
from ..messages import BUILD_FAILED_HINTS, COMPOSE_MISSING_HINTS, DOCKER_MISSING_HINTS
from ..runner import ProcessRunner

logger = get_logger(__name__)

DOCKER_BINARY = "docker"
COMPOSE_BINARY = "docker-compose"


def require_docker(runner: ProcessRunner) -> str:
    """Ensure the docker CLI is on PATH

    Returns:
        Resolved path of the docker executable

    Raises:
        PreflightError: If docker cannot be found
    """
    path = runner.which(DOCKER_BINARY)
    if path is None:
        logger.error("docker executable not found on PATH")
        raise PreflightError("❌ Docker is not installed.", DOCKER_MISSING_HINTS)
    return path


def resolve_compose_command(runner: ProcessRunner, allow_plugin: bool = False) -> List[str]:
    """Find the command used to drive Docker Compose

    Prefers the standalone docker-compose binary. With allow_plugin set, falls
    back to the `docker compose` plugin when `docker compose version` succeeds.

    Args:
        runner: Process runner to query with
        allow_plugin: Whether the Compose v2 plugin is an acceptable substitute

    Returns:
        Command prefix, e.g. ["docker-compose"] or ["docker", "compose"]

    Raises:
        PreflightError: If no usable compose command exists
    """
    if runner.which(COMPOSE_BINARY) is not None:
        return [COMPOSE_BINARY]

    if allow_plugin:
        result = runner.run([DOCKER_BINARY, "compose", "version"])
        if result.returncode == 0:
            logger.info("docker-compose not found, using the docker compose plugin")
            return [DOCKER_BINARY, "compose"]

    logger.error("docker-compose executable not found on PATH")
    raise PreflightError("❌ Docker Compose is not available.", COMPOSE_MISSING_HINTS)


def get_version(runner: ProcessRunner, cmd: List[str]) -> str:
    """Return the version banner printed by `<cmd> --version`.

    The exit status is not checked; whatever the tool printed is returned.
    """
    result = runner.run([*cmd, "--version"])
    output = (result.stdout or "").strip() or (result.stderr or "").strip()
    logger.info(f"{' '.join(cmd)} version: {output}")
    return output


def _format_port(entry) -> str:
    if isinstance(entry, dict):
        published = entry.get("published", "")
        target = entry.get("target", "")
        return f"{published}:{target}" if published else str(target)
    return str(entry)


def load_compose_services(compose_file: Path) -> Dict[str, List[str]]:
    """Read the services defined in a compose file

    Args:
        compose_file: Path to docker-compose.yml

    Returns:
        Mapping of service name to its published port specs. Empty when the
        file is missing, unparseable or defines no services.
    """
    if not compose_file.is_file():
        logger.warning(f"Compose file not found at {compose_file}")
        return {}

    try:
        with open(compose_file, "r", encoding="utf-8") as f:
            definition = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Could not read compose file {compose_file}: {e}")
        return {}

    if not isinstance(definition, dict):
        return {}

    services = definition.get("services") or {}
    if not isinstance(services, dict):
        return {}

    summary = {}
    for name, service in services.items():
        ports = service.get("ports") if isinstance(service, dict) else None
        if not isinstance(ports, list):
            ports = []
        summary[str(name)] = [_format_port(p) for p in ports]

    logger.info(f"Compose services in {compose_file}: {summary}")
    return summary


def compose_up(runner: ProcessRunner, compose: List[str]) -> None:
    """Build images and start services detached (`up --build -d`)

    Output goes straight to the terminal and there is no timeout.

    Raises:
        ComposeError: If the command could not be started or exited non-zero
    """
    cmd = [*compose, "up", "--build", "-d"]
    try:
        result = runner.run(cmd, capture_output=False)
    except OSError as e:
        logger.error(f"Could not run {' '.join(cmd)}: {e}")
        raise ComposeError(f"❌ Failed to start the container: {e}", 1, BUILD_FAILED_HINTS) from e

    if result.returncode != 0:
        logger.error(f"{' '.join(cmd)} exited with status {result.returncode}")
        raise ComposeError("❌ Failed to start the container.", result.returncode, BUILD_FAILED_HINTS)

    logger.info("Containers built and started")


def compose_ps(runner: ProcessRunner, compose: List[str]) -> None:
    """Print container status (`ps`). Failures are only logged."""
    cmd = [*compose, "ps"]
    try:
        result = runner.run(cmd, capture_output=False)
    except OSError as e:
        logger.warning(f"Could not run {' '.join(cmd)}: {e}")
        return

    if result.returncode != 0:
        logger.warning(f"{' '.join(cmd)} exited with status {result.returncode}")
