#!/usr/bin/env python3
"""
notebase CLI.

Primary entry point for all application operations.
Use --service to select what to run.

Usage:
    python cli.py --help
    python cli.py --service server --verbose
    python cli.py --service init-db
    python cli.py --service health --debug
    python cli.py --service config
    python cli.py --service test --test-type unit
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

from notebase.core.logging import get_logger, setup_logging

PROJECT_ROOT = Path(__file__).parent


def validate_project_root() -> Path:
    """Validate that we're running from the project root."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.echo(
            click.style("Error: .project_root not found. Run from project root.", fg="red"),
            err=True,
        )
        sys.exit(1)
    return PROJECT_ROOT


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["server", "init-db", "health", "config", "test", "info"]),
    default="info",
    help="Service or command to run.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
@click.option(
    "--host",
    default=None,
    help="Server host.",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Server port.",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload (server only).",
)
@click.option(
    "--test-type",
    type=click.Choice(["all", "unit", "integration"]),
    default="all",
    help="Test type to run.",
)
@click.option(
    "--coverage",
    is_flag=True,
    help="Run tests with coverage.",
)
def main(
    service: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    test_type: str,
    coverage: bool,
) -> None:
    """
    notebase CLI.

    \b
    Examples:
        python cli.py --service server --reload --verbose
        python cli.py --service init-db
        python cli.py --service health --debug
        python cli.py --service config
        python cli.py --service test --test-type unit --coverage
        python cli.py --service info
    """
    validate_project_root()

    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = "WARNING"

    setup_logging(level=log_level, format_type="console")

    logger = get_logger(__name__)

    logger.debug("CLI invoked", extra={"service": service, "log_level": log_level})

    if service == "server":
        run_server(logger, host, port, reload)
    elif service == "init-db":
        init_db(logger)
    elif service == "health":
        check_health(logger)
    elif service == "config":
        show_config(logger)
    elif service == "test":
        run_tests(logger, test_type, coverage)
    elif service == "info":
        show_info(logger)


def run_server(logger, host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI development server."""
    from notebase.core.config import get_app_config

    try:
        server_config = get_app_config().application.server
    except Exception as e:
        logger.error("Failed to load configuration.", extra={"error": str(e)})
        click.echo(
            click.style("Error: Could not load config/settings/application.yaml.", fg="red"),
            err=True,
        )
        sys.exit(1)

    server_host = host or server_config.host
    server_port = port or server_config.port

    logger.info(
        "Starting server",
        extra={"host": server_host, "port": server_port, "reload": reload},
    )

    cmd = [
        sys.executable, "-m", "uvicorn",
        "notebase.main:app",
        "--host", server_host,
        "--port", str(server_port),
    ]

    if reload:
        cmd.append("--reload")

    click.echo(f"Starting server at http://{server_host}:{server_port}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        logger.error("Server failed to start", extra={"exit_code": e.returncode})
        sys.exit(e.returncode)


async def _init_db() -> list[str]:
    from notebase.core.database import Database
    from notebase.models import Base

    database = Database.from_config()
    try:
        await database.init_schema()
    finally:
        await database.close()
    return sorted(Base.metadata.tables)


def init_db(logger) -> None:
    """Create missing tables in the configured store."""
    try:
        tables = asyncio.run(_init_db())
    except Exception as e:
        logger.error("Schema creation failed", extra={"error": str(e)})
        click.echo(click.style(f"Error creating schema: {e}", fg="red"), err=True)
        sys.exit(1)

    logger.info("Schema created", extra={"tables": tables})
    click.echo(f"Schema ready: {', '.join(tables)}")


async def _ping_db() -> str:
    from notebase.core.config import get_database_url
    from notebase.core.database import Database

    database = Database.from_config()
    try:
        await database.ping()
    finally:
        await database.close()
    return get_database_url().render_as_string(hide_password=True)


def _check_config() -> str:
    from notebase.core.config import get_app_config

    return f"App: {get_app_config().application.name}"


def _check_app() -> str:
    from notebase.main import create_app

    return f"Title: {create_app().title}"


def _check_database() -> str:
    return asyncio.run(_ping_db())


HEALTH_CHECKS = [
    ("YAML configuration", _check_config),
    ("FastAPI application", _check_app),
    ("Database connection", _check_database),
]


def check_health(logger) -> None:
    """Run each health check in turn and exit non-zero if any fails."""
    click.echo("Health Check Results:")
    click.echo("-" * 50)

    failed = 0
    for name, check in HEALTH_CHECKS:
        try:
            detail = check()
        except Exception as e:
            failed += 1
            logger.error("Health check failed", extra={"check": name, "error": str(e)})
            click.echo(f"  {click.style('FAIL', fg='red')}  {name} ({e})")
        else:
            click.echo(f"  {click.style('PASS', fg='green')}  {name} ({detail})")

    click.echo("-" * 50)
    if failed:
        click.echo(click.style(f"{failed} of {len(HEALTH_CHECKS)} checks failed.", fg="yellow"))
        sys.exit(1)
    click.echo(click.style("All checks passed!", fg="green"))


def _echo_mapping(data: dict, indent: int = 2) -> None:
    for key, value in data.items():
        if isinstance(value, dict):
            click.echo(f"{' ' * indent}{key}:")
            _echo_mapping(value, indent + 2)
        else:
            click.echo(f"{' ' * indent}{key}: {value}")


def show_config(logger) -> None:
    """Print every validated settings file."""
    from notebase.core.config import get_app_config

    try:
        app_config = get_app_config()
    except Exception as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        click.echo(click.style(f"Error loading configuration: {e}", fg="red"), err=True)
        sys.exit(1)

    for title, section in (
        ("Application Settings", app_config.application),
        ("Database Settings", app_config.database),
        ("Logging Settings", app_config.logging),
    ):
        click.echo(title)
        _echo_mapping(section.model_dump())
        click.echo()


TEST_PATHS = {
    "all": "tests",
    "unit": "tests/unit",
    "integration": "tests/integration",
}


def run_tests(logger, test_type: str, coverage: bool) -> None:
    """Run pytest over the selected test tree and exit with its status."""
    cmd = [sys.executable, "-m", "pytest", TEST_PATHS[test_type], "-v"]
    if coverage:
        cmd += ["--cov=notebase", "--cov-report=term-missing"]

    logger.info("Running tests", extra={"command": cmd})
    sys.exit(subprocess.call(cmd, cwd=PROJECT_ROOT))


def show_info(logger) -> None:
    """Display application information."""
    try:
        from notebase.core.config import get_app_config, get_server_base_url

        app_settings = get_app_config().application
        base_url = get_server_base_url()
    except Exception as e:
        logger.error(
            "Failed to load application configuration",
            extra={"error": str(e)},
        )
        click.echo(
            click.style("Error: Could not load application.yaml configuration.", fg="red"),
            err=True,
        )
        sys.exit(1)

    click.echo(f"{app_settings.name} {app_settings.version}")
    click.echo("=" * 40)
    click.echo(app_settings.description)
    click.echo(f"Server: {base_url}")
    click.echo()
    click.echo("Services (--service):")
    click.echo("  server         FastAPI development server")
    click.echo("  init-db        Create missing database tables")
    click.echo("  health         Check configuration and database")
    click.echo("  config         Display configuration")
    click.echo("  test           Run test suite")
    click.echo("  info           Show this information")
    click.echo()
    click.echo("Options:")
    click.echo("  --verbose, -v  Enable INFO level logging")
    click.echo("  --debug, -d    Enable DEBUG level logging")

    logger.debug("Info displayed")


if __name__ == "__main__":
    main()
