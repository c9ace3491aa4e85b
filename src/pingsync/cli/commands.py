"""pingsync CLI - Main Entry Point.

Usage:
    pingsync --config checks.yaml             # Apply the config to Pingdom
    pingsync --config checks.yaml --dry-run   # Show what would change
    pingsync --config checks.yaml --soft      # Pause removed checks instead of deleting them

Exit codes:
    0  Reconciliation succeeded
    1  Config could not be loaded or validated, or a Pingdom call failed
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from pingsync.api.client import PingdomApi
from pingsync.api.transport import PingdomTransport
from pingsync.cli.display import ReportRenderer
from pingsync.core.config import SyncConfig, load_config
from pingsync.core.exceptions import ConfigLoadError, PingsyncError
from pingsync.core.logging_config import setup_logging
from pingsync.core.settings import settings
from pingsync.sync.models import ReconciliationResult
from pingsync.sync.reconciler import CheckReconciler
from pingsync.sync.validation import validate_config

# Windows async compatibility
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

logger = logging.getLogger("pingsync.cli")

# ============================================
# App Definition
# ============================================
app = typer.Typer(
    name="pingsync",
    help="Pingdom Configurator",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# ============================================
# Options
# ============================================
ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        help="The location of your config file.",
    ),
]

DryRunOption = Annotated[
    bool,
    typer.Option(
        "--dry-run",
        help="Dry Run mode: compute and report changes without applying them",
    ),
]

SoftOption = Annotated[
    bool,
    typer.Option(
        "--soft",
        help="Soft mode. Will not delete checks, but pause them",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose", "-v",
        help="Show debug logs",
    ),
]


async def _run_reconciliation(config: SyncConfig) -> list[ReconciliationResult]:
    """Open the Pingdom transport and reconcile both kinds."""
    token = config.api_token or settings.api_token
    if not token:
        raise ConfigLoadError("No Pingdom API token: set apiToken in the config file or PINGSYNC_API_TOKEN")

    async with PingdomTransport(token) as transport:
        api = PingdomApi(config, transport)
        reconciler = CheckReconciler(config, api)
        return await reconciler.run()


@app.command()
def main(
    config: ConfigOption,
    dry_run: DryRunOption = False,
    soft: SoftOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Add, update and remove Pingdom checks so they match the config file."""
    setup_logging(verbose)

    try:
        raw_config = load_config(config)
        sync_config = validate_config(raw_config).with_flags(dry_run=dry_run, soft=soft)
        results = asyncio.run(_run_reconciliation(sync_config))
    except PingsyncError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    ReportRenderer(console).display(results, soft=soft, dry_run=dry_run)
