"""CLI entry point for migrating tasks between notes.

Usage:
    taskmigration daily [--note 00_Daily/2026-02-15.md] [--dry-run]
    taskmigration sideways --note 00_Daily/2026-02-15.md [--to Projects/Backlog.md]

`daily` carries open tasks from earlier daily notes into the given daily note
(today's by default). `sideways` moves open tasks out of a note into another
one; without --to or a configured sideways file, you pick the destination.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from datetime import date
from pathlib import Path
from typing import Any

from taskmigration.config import get_settings
from taskmigration.migration.errors import TaskMigrationError
from taskmigration.migration.migrator import MigrationResult, TaskMigrator
from taskmigration.settings import load_migration_settings
from taskmigration.vault.connector import VaultConnector
from taskmigration.vault.daily import DailyNoteIndex

logger = logging.getLogger("taskmigration.scripts")


def _log_structured(event: str, **kwargs: Any) -> None:
    """Log a structured JSON event for migration milestones."""
    logger.info(json.dumps({"event": event, **kwargs}))


def choose_destination(candidates: list[Path]) -> Path | None:
    """Ask on the terminal which note should receive the tasks.

    Accepts a list number or a vault-relative path; empty input cancels.
    """
    if not candidates:
        print("No other notes in the vault.")
        return None
    for i, path in enumerate(candidates, start=1):
        print(f"  {i:>3}. {path.as_posix()}")
    answer = input("Destination (number or path, empty to cancel): ").strip()
    if not answer:
        return None
    if answer.isdigit():
        index = int(answer) - 1
        if 0 <= index < len(candidates):
            return candidates[index]
        print(f"No note numbered {answer}.")
        return None
    return Path(answer)


def _summarize(result: MigrationResult) -> str:
    prefix = "DRY RUN: would migrate" if result.dry_run else "Migrated"
    summary = (
        f"{prefix} {result.migrated_count} line(s) into {result.destination.as_posix()} "
        f"from {len(result.notes_updated)} note(s), {result.notes_scanned} scanned"
    )
    if result.stopped_at:
        summary += f", stopped at {result.stopped_at.as_posix()}"
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(description="Migrate unfinished tasks between notes")
    parser.add_argument(
        "command",
        nargs="?",
        default="daily",
        choices=["daily", "sideways"],
        help="Which migration to run (default: daily)",
    )
    parser.add_argument(
        "--note",
        type=Path,
        default=None,
        help="Vault-relative note to migrate into (daily) or out of (sideways); "
        "defaults to today's daily note",
    )
    parser.add_argument(
        "--to",
        type=Path,
        default=None,
        help="Sideways destination note (default: configured sideways file, else ask)",
    )
    parser.add_argument(
        "--vault-path",
        type=Path,
        default=None,
        help="Override vault path (default: from config/env)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Preview without writing")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = get_settings()

    vault_path = args.vault_path
    if vault_path is None:
        vault_path = settings.vault_path

    if vault_path is None:
        logger.error("No vault path configured. Set TASKMIGRATION_VAULT_PATH or use --vault-path")
        sys.exit(1)

    vault_path = Path(vault_path)
    if not vault_path.exists():
        logger.error("Vault path does not exist: %s", vault_path)
        sys.exit(1)

    daily_index = DailyNoteIndex(vault_path, settings.daily_folder, settings.daily_format)
    note_path = args.note if args.note is not None else daily_index.path_for(date.today())

    migrator = TaskMigrator(
        VaultConnector(vault_path),
        daily_index,
        load_migration_settings(Path(settings.data_path)),
        dry_run=args.dry_run,
    )

    logger.info("Vault path: %s", vault_path)
    start = time.time()
    try:
        if args.command == "daily":
            result = migrator.migrate_daily(note_path)
        else:
            result = migrator.migrate_sideways(note_path, args.to, chooser=choose_destination)
    except TaskMigrationError as e:
        logger.error("Migrate tasks (%s): %s", args.command, e)
        _log_structured("migration_failed", command=args.command, error=str(e))
        sys.exit(1)

    elapsed = int((time.time() - start) * 1000)
    logger.info("  %s", _summarize(result))
    for line in result.lines:
        logger.debug("  %s", line)
    _log_structured(
        "migration_complete",
        command=args.command,
        migrated=result.migrated_count,
        notes_scanned=result.notes_scanned,
        dry_run=result.dry_run,
        duration_ms=elapsed,
    )


if __name__ == "__main__":
    main()
