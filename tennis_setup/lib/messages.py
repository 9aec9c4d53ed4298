"""Operator-facing text printed by the setup runner"""

from rich.markup import escape

BANNER = """[bold]🎾 Welcome to Tennis Ranking System Docker Setup![/bold]
================================================
"""

DOCKER_MISSING_HINTS = [
    "Please install Docker from https://docker.com/get-started",
    "",
    "After installing Docker, run this script again.",
]

COMPOSE_MISSING_HINTS = [
    "Please install Docker Compose or use Docker Desktop which includes it.",
]

BUILD_FAILED_HINTS = [
    "Check the error messages above and try again.",
]

BUILDING = """🐳 Building Docker container...
This may take a few minutes on first run..."""

SUCCESS_SUMMARY = """
[bold green]🎉 Setup Complete![/bold green]
==================

🌟 Your tennis ranking system is now running in Docker!
📊 All users will see the same matches and rankings
📁 Data is automatically saved to the ./{data_dir} folder

🌐 Access your system:
• Local: http://localhost:{port}
• Network: http://YOUR-IP:{port}

📋 Docker Commands:
• Stop system: {compose} down
• Restart system: {compose} up -d
• View logs: {compose} logs -f
• Update system: {compose} up --build -d

🆘 Need help? Check {guide_file} for detailed instructions.
"""

READY = "🚀 System is ready! Open http://localhost:{port} in your browser."


def format_success_summary(data_dir: str, port: int, compose: str, guide_file: str) -> str:
    """Fill in the success summary. Values come from settings, so they are escaped."""
    return SUCCESS_SUMMARY.format(
        data_dir=escape(str(data_dir)),
        port=escape(str(port)),
        compose=escape(compose),
        guide_file=escape(str(guide_file)),
    )


def format_ready(port: int) -> str:
    return READY.format(port=escape(str(port)))
