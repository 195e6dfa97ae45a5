#!/usr/bin/env python3
"""
CLI script to seed the records file with sample daily entries.

Usage:
    # Seed the last 14 days into the configured records file
    python scripts/seed_records.py

    # Clear existing records before seeding
    python scripts/seed_records.py --clear

    # Seed 30 days into a different file
    python scripts/seed_records.py --days 30 --file /tmp/carbonRecords.json
"""

import argparse
import logging
import random
import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path so we can import carbon_tracker modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from carbon_tracker.core.config import (
    configure_logging,
    get_config,
    get_config_file_from_env,
)
from carbon_tracker.pydantic_models.record import CarbonRecordPydModel, local_now
from carbon_tracker.services.aggregators import TrendAggregator
from carbon_tracker.storage.record_store import RecordStore
from carbon_tracker.utils.formatting import format_day, format_emission, format_time
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logger = logging.getLogger(__name__)

console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_config(args, file_path: Path):
    """Print configuration details."""
    config_table = Table(show_header=False, box=None, padding=(0, 2))
    config_table.add_column("Setting", style="bold yellow")
    config_table.add_column("Value", style="green")

    config_table.add_row("📁 Records File", str(file_path))
    config_table.add_row("📅 Days", str(args.days))
    config_table.add_row("🗑️  Clear Existing", "Yes" if args.clear else "No")

    console.print(config_table)
    console.print()


def build_sample_records(days: int, seed: int | None = None) -> list[CarbonRecordPydModel]:
    """One record per day for the last ``days`` days, today included."""
    rng = random.Random(seed)
    now = local_now()
    return [
        CarbonRecordPydModel(
            date=now - timedelta(days=offset),
            transportation_km=round(rng.uniform(0, 60), 1),
            energy_kwh=round(rng.uniform(2, 15), 1),
            waste_kg=round(rng.uniform(0, 3), 2),
            notes="sample entry",
        )
        for offset in range(days - 1, -1, -1)
    ]


def print_records(store: RecordStore):
    """Print stored records and a summary using Rich Tables."""
    print_header("STORED RECORDS", "bold green")

    records_table = Table(show_header=True, box=None, padding=(0, 2))
    records_table.add_column("Date", style="bold cyan")
    records_table.add_column("Transport", justify="right")
    records_table.add_column("Energy", justify="right")
    records_table.add_column("Waste", justify="right")
    records_table.add_column("Total", justify="right", style="bold green")

    for record in store.sorted_records():
        records_table.add_row(
            f"{format_day(record.date)} {format_time(record.date)}",
            format_emission(record.transportation_emission),
            format_emission(record.energy_emission),
            format_emission(record.waste_emission),
            format_emission(record.total_emission),
        )

    console.print(records_table)
    console.print()

    summary = TrendAggregator(store).history_summary()
    summary_table = Table(show_header=False, box=None, padding=(0, 2))
    summary_table.add_column("Label", style="bold yellow")
    summary_table.add_column("Value", style="bold magenta")
    summary_table.add_row("📈 Records", str(summary.record_count))
    summary_table.add_row("🌍 Total", format_emission(summary.total))
    summary_table.add_row("📊 Average", format_emission(summary.average_per_record))

    console.print(summary_table)
    console.print()


def main():
    """Main entry point for the seeding script."""
    parser = argparse.ArgumentParser(
        description="Seed the records file with sample daily entries"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Remove existing records before seeding",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=14,
        help="Number of days to seed, ending today (default: 14)",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Records file (default: from the environment's config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible sample values",
    )

    args = parser.parse_args()

    config = get_config(get_config_file_from_env())
    configure_logging(config)
    file_path = Path(args.file).expanduser() if args.file else config.data_file_path

    print_header("RECORD SEEDING", "bold cyan")
    print_config(args, file_path)

    try:
        store = RecordStore(file_path)
        store.last_result.raise_for_status()

        if args.clear and len(store):
            store.delete(range(len(store))).raise_for_status()
            logger.info("Cleared existing records")

        with console.status("[bold cyan]Seeding records...", spinner="dots"):
            for record in build_sample_records(args.days, seed=args.seed):
                if store.record_for_today(today=record.local_date) is not None:
                    continue
                store.add(record).raise_for_status()

        print_records(store)

        console.print(
            Panel(
                Text("✅ SEEDING COMPLETED SUCCESSFULLY", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)

        console.print()
        console.print(
            Panel(
                f"[bold red]❌ SEEDING FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)


if __name__ == "__main__":
    main()
