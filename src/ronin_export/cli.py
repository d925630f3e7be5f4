"""
Command-line entry point.

Usage:
    ronin-export
    ronin-export --address ronin:0123...cdef --output-dir exports/

Without --address the address is read from an interactive prompt.
"""

import logging
import sys
from pathlib import Path

import click
import yaml

from .address import validate_address
from .client import RoninRestClient
from .config import LOG_LEVELS, load_config
from .exceptions import ExportError, InvalidAddressError
from .exporter import export_address, write_records
from .utils import setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--address",
    prompt="Please enter your Ronin address",
    help="Wallet address in ronin: or 0x form (prompted for if omitted)",
)
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to export config YAML file (optional)",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the <address>.json file (default: from config)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: from config)",
)
def main(
    address: str, config: Path | None, output_dir: Path | None, log_level: str | None
) -> None:
    """
    Export all transactions of a Ronin wallet to <address>.json.

    Transactions are decoded, paired with their decoded receipts and
    sorted by block number.
    """
    try:
        cfg = load_config(config)
    except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(cfg.logging, level=log_level)

    try:
        normalized = validate_address(address)
    except InvalidAddressError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Exporting transactions for {normalized}")

    try:
        with RoninRestClient(
            base_url=cfg.api.base_url,
            timeout=cfg.api.timeout,
            max_retries=cfg.api.max_retries,
            backoff_factor=cfg.api.backoff_factor,
        ) as client:
            records = export_address(
                client,
                normalized,
                start_page=cfg.pagination.start_page,
                skip_self_transfers=cfg.export.skip_self_transfers,
            )

        output_path = write_records(
            records,
            normalized,
            output_dir=output_dir if output_dir is not None else cfg.output_dir,
            pretty=cfg.export.pretty,
        )

    except ExportError as e:
        logger.error(f"Export failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    logger.info(f"Export completed successfully: {output_path}")


if __name__ == "__main__":
    main()
