"""Shared pytest fixtures for setup tests"""

import subprocess
from pathlib import Path

import pytest


DOCKER_VERSION = "Docker version 24.0.7, build afdd53b"
COMPOSE_VERSION = "docker-compose version 1.29.2, build 5becea4c"


class FakeRunner:
    """Stand-in for ProcessRunner that never touches real tooling

    Records every which() lookup and run() call so tests can assert on what
    the setup did and in which order.
    """

    def __init__(self, available=("docker", "docker-compose"), returncodes=None, outputs=None):
        self.available = set(available)
        self.returncodes = dict(returncodes or {})
        self.outputs = {
            ("docker", "--version"): DOCKER_VERSION,
            ("docker-compose", "--version"): COMPOSE_VERSION,
            **(outputs or {}),
        }
        self.lookups = []
        self.calls = []

    def which(self, name):
        self.lookups.append(name)
        return f"/usr/bin/{name}" if name in self.available else None

    def run(self, cmd, capture_output=True):
        cmd = list(cmd)
        self.calls.append(cmd)
        key = tuple(cmd)
        returncode = self.returncodes.get(key, 0)
        if not capture_output:
            return subprocess.CompletedProcess(cmd, returncode)
        return subprocess.CompletedProcess(cmd, returncode, stdout=self.outputs.get(key, ""), stderr="")

    def ran(self, *cmd) -> bool:
        """Whether exactly this command was run"""
        return list(cmd) in self.calls


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances

    Usage:
        def test_something(make_runner):
            runner = make_runner(available={"docker"})
            runner = make_runner(returncodes={("docker-compose", "up", "--build", "-d"): 1})
    """
    return FakeRunner


@pytest.fixture
def fake_runner():
    """FakeRunner with docker and docker-compose present and every command succeeding"""
    return FakeRunner()


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """Empty project directory set as the current working directory

    Returns:
        Path: The project directory
    """
    project = tmp_path / "tennis-ranking"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def compose_file(work_dir):
    """Project directory with a docker-compose.yml defining app and postgres services"""
    path = work_dir / "docker-compose.yml"
    path.write_text(
        """version: '3.8'
services:
  tennis-app:
    build: .
    ports:
      - "3001:3001"
    volumes:
      - ./data:/app/data
  postgres:
    image: postgres:15-alpine
    ports:
      - "${DB_PORT:-5432}:5432"
"""
    )
    return path


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temporary path

    Returns:
        Path: Path to the (not yet existing) settings file
    """
    config_file = tmp_path / "config" / "settings.json"
    monkeypatch.setattr("tennis_setup.lib.config.CONFIG_FILE", config_file)
    return config_file


@pytest.fixture(scope="session")
def docker_available():
    """Check if Docker is available, skip tests if not

    Session-scoped so the check only happens once per test session.
    """
    try:
        result = subprocess.run(
            ["docker", "info"],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip("Docker is not available")
    except FileNotFoundError:
        pytest.skip("Docker is not installed")
    return True
