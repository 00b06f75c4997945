"""CLI entry point for antisync."""

import click
from pathlib import Path
from typing import Optional
from antisync import __version__
from antisync.config.loader import load_config
from antisync.models.config import TargetConfig
from antisync.services.exceptions import ApiError
from antisync.services.http_client import AntiblogClient
from antisync.services.sync import PushCommand, StatusCommand, SyncSession
from antisync.utils.console import Reporter
from antisync.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)

verbose_option = click.option("--verbose", is_flag=True, help="Also list entries that are up to date")
target_argument = click.argument("target")
paths_argument = click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))


def load_target_config(config_path: Optional[Path], target: str) -> TargetConfig:
    """
    Load configuration and select one target.

    Raises:
        click.ClickException: If config is missing, has invalid permissions,
            fails validation, or has no such target
    """
    try:
        config = load_config(config_path, target=target)
    except FileNotFoundError as e:
        logger.error("config_not_found", path=str(config_path))
        raise click.ClickException(str(e))
    except PermissionError as e:
        logger.error("config_permission_error", path=str(config_path))
        raise click.ClickException(str(e))
    except Exception as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(f"Configuration validation failed:\n{e}")

    try:
        return config.get_target(target)
    except ValueError as e:
        logger.error("config_target_missing", target=target)
        raise click.ClickException(str(e))


def run_sync(ctx: click.Context, command_class, target: str, paths: tuple[Path, ...], verbose: bool) -> None:
    """Run a sync command over the given paths (current directory by default)."""
    target_config = load_target_config(ctx.obj["config_path"], target)
    reporter = Reporter(verbose=verbose or ctx.obj["verbose"])

    logger.info(
        "sync_started",
        command=command_class.__name__,
        target=target,
        paths=[str(p) for p in paths],
    )
    try:
        with AntiblogClient(target_config) as client:
            session = SyncSession(target, client, reporter)
            session.run(command_class(session), paths or (Path("."),))
    except ApiError as e:
        logger.error("sync_failed", target=target, error=str(e))
        raise click.ClickException(f"API request to {target_config.base_url} failed: {e}")
    logger.info("sync_completed", command=command_class.__name__, target=target)


@click.group()
@click.version_option(version=__version__, prog_name="antisync")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: ~/.config/antisync/config.yaml)",
)
@verbose_option
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """antisync: Publish antiblog markup files to an antiblog server."""
    configure_logging()

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


@cli.command()
@target_argument
@paths_argument
@verbose_option
@click.pass_context
def status(ctx: click.Context, target: str, paths: tuple[Path, ...], verbose: bool):
    """
    Compare source files with what TARGET has published.

    PATHS are files or directories scanned recursively (default: current
    directory).

    Examples:
        antisync status dev                # Scan the current directory
        antisync status prod posts/ pages/
    """
    run_sync(ctx, StatusCommand, target, paths, verbose)


@cli.command()
@target_argument
@paths_argument
@verbose_option
@click.pass_context
def push(ctx: click.Context, target: str, paths: tuple[Path, ...], verbose: bool):
    """
    Publish new and changed entries to TARGET.

    Ids assigned to new entries are written back into their source files.

    Examples:
        antisync push dev
        antisync push prod posts/2024/
    """
    run_sync(ctx, PushCommand, target, paths, verbose)


def main():
    """Main entry point for setuptools console script."""
    cli()


if __name__ == "__main__":
    main()
