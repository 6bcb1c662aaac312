"""Main CLI entry point for bids-checker."""

import logging
from typing import Optional

import click

from bids_checker import __version__
from bids_checker.cli.validate import init_config as init_config_cmd
from bids_checker.cli.validate import validate as validate_cmd


def configure_logging(log_level: str, log_file: Optional[str] = None) -> None:
    """Configure console logging (WARNING) and optional file logging (log_level)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - WARNING only (for user-facing messages)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
    else:
        console_handler.setLevel(min(logging.WARNING, getattr(logging, log_level.upper())))

    # nibabel reports header oddities through logging; keep them out of the console
    logging.getLogger("nibabel").setLevel(logging.ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="bids-checker")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write logs at --log-level to this file (console then shows warnings only)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_file: Optional[str]) -> None:
    """bids-checker: Validate BIDS neuroimaging datasets.

    Checks file naming against the BIDS path grammar, validates sidecar
    metadata, TSV tables, NIfTI headers and diffusion gradient files, and runs
    cross-file consistency checks.
    """
    configure_logging(log_level, log_file)

    ctx.ensure_object(dict)
    ctx.obj["log_file"] = log_file


# Register commands
cli.add_command(validate_cmd, name="validate")
cli.add_command(init_config_cmd, name="init-config")


if __name__ == "__main__":
    cli()
