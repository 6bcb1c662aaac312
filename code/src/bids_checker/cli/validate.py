"""Validate CLI command implementation."""

import json
from typing import Optional

import click
from tqdm import tqdm

from bids_checker.config import ConfigLoadError, create_example_config, load_config
from bids_checker.io import DatasetNotFoundError
from bids_checker.pipeline import NotBIDSDatasetError, validate as validate_dataset
from bids_checker.cli.report import format_text


@click.command()
@click.argument("dataset_dir", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, readable=True),
    help="Configuration file path (default: .bids-checker.yaml if present)",
)
@click.option(
    "--ignore-warnings/--no-ignore-warnings",
    default=None,
    help="Do not report warnings",
)
@click.option(
    "--ignore-nifti-headers/--no-ignore-nifti-headers",
    default=None,
    help="Skip NIfTI header checks",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of parallel workers for file validation",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format",
    show_default=True,
)
@click.option("--verbose", "-v", is_flag=True, help="List every file affected by an issue")
@click.option(
    "--progress/--no-progress",
    default=False,
    help="Show progress bars",
    show_default=True,
)
@click.pass_context
def validate(
    ctx: click.Context,
    dataset_dir: str,
    config: Optional[str],
    ignore_warnings: Optional[bool],
    ignore_nifti_headers: Optional[bool],
    workers: Optional[int],
    output_format: str,
    verbose: bool,
    progress: bool,
) -> None:
    """Validate the BIDS dataset in DATASET_DIR.

    Exits with status 1 when errors are found or the directory does not look
    like a BIDS dataset.

    \b
    Examples:
        bids-checker validate /data/ds000001
        bids-checker validate /data/ds000001 --ignore-warnings --format json
        bids-checker validate /data/ds000001 --ignore-nifti-headers --workers 16
    """
    try:
        cfg = load_config(config)
        updates = {
            "ignore_warnings": ignore_warnings,
            "ignore_nifti_headers": ignore_nifti_headers,
            "max_workers": workers,
        }
        cfg = cfg.model_copy(update={k: v for k, v in updates.items() if v is not None})

        bars: dict[str, tqdm] = {}

        def progress_cb(phase: str, completed: int, total: int) -> None:
            if phase not in bars:
                bars[phase] = tqdm(total=total, desc=f"Validating {phase}", unit="file")
            bars[phase].update(1)

        try:
            result = validate_dataset(
                dataset_dir,
                options=cfg.options,
                max_workers=cfg.max_workers,
                progress_callback=progress_cb if progress else None,
            )
        finally:
            for bar in bars.values():
                bar.close()

        if output_format == "json":
            click.echo(json.dumps(result.to_dict(), indent=2))
        else:
            click.echo(format_text(result, verbose=verbose))

        log_file = ctx.obj.get("log_file") if ctx.obj else None
        if log_file and output_format == "text":
            click.echo(f"\nDetailed logs: {log_file}")

        if not result.is_valid:
            ctx.exit(1)

    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except NotBIDSDatasetError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except DatasetNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command()
@click.option(
    "--output",
    default=".bids-checker.yaml",
    help="Where to write the example configuration",
    show_default=True,
)
def init_config(output: str) -> None:
    """Write an example configuration file."""
    try:
        create_example_config(output)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e
    click.echo(f"✓ Wrote example configuration to {output}")
