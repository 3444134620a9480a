"""CLI for previewing selective database restores.

Runs the same name resolution and file filtering as
``DatabaseSpecExtractProvider`` against plain input files, so the effect
of a database selection can be checked before a restore.

Usage:
    selective-restore patterns --metadata oids.json --db app
    selective-restore plan --metadata oids.json --files files.txt --db app
    selective-restore plan --metadata oids.json --files files.txt --db app --list-kept
    selective-restore plan --metadata oids.json --files files.txt --config restore.toml

Inputs:
    --metadata  JSON object mapping database name to oid, e.g. {"app": 16384}
    --files     Archive paths, one per line

Commands:
    patterns  - Show the restore patterns for the selected databases
    plan      - Show which archive files a selective restore would skip
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from selective_restore.config.loader import load_restore_config
from selective_restore.config.models import RestoreConfig
from selective_restore.restore.errors import RestoreFilterError
from selective_restore.restore.filter import filter_files_to_unwrap
from selective_restore.restore.models import FilesMetadata
from selective_restore.restore.patterns import (
    add_system_databases,
    make_restore_patterns,
)

console = Console()


# ============================================================================
# Input helpers
# ============================================================================


def _read_metadata(path: str | Path) -> FilesMetadata:
    """Read a ``{name: oid}`` JSON mapping into FilesMetadata.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a JSON object of integer oids.
    """
    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object of database oids in {path}")

    return FilesMetadata.from_oids(data)


def _read_files(path: str | Path) -> set[str]:
    """Read archive paths, one per line, ignoring blank lines."""
    lines = Path(path).read_text().splitlines()
    return {line.strip() for line in lines if line.strip()}


def _resolve_config(args: argparse.Namespace) -> RestoreConfig:
    """Build the effective config: TOML file first, ``--db`` overrides."""
    config = load_restore_config(args.config) if args.config else RestoreConfig()
    if args.databases:
        config = config.model_copy(update={"only_databases": args.databases})
    return config


def _build_patterns(config: RestoreConfig, meta: FilesMetadata) -> list[str]:
    databases = add_system_databases(config.only_databases, config.system_databases)
    return make_restore_patterns(
        databases, meta.databases_by_names, config.tablespace
    )


# ============================================================================
# Command implementations
# ============================================================================


def cmd_patterns(args: argparse.Namespace) -> int:
    """Handle patterns command."""
    try:
        config = _resolve_config(args)
        meta = _read_metadata(args.metadata)
        patterns = _build_patterns(config, meta)
    except (OSError, ValueError, RestoreFilterError) as e:
        console.print(f"[bold red]x[/bold red] {escape(str(e))}")
        return 1

    for pattern in patterns:
        console.print(pattern, highlight=False, markup=False)
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    """Handle plan command."""
    try:
        config = _resolve_config(args)
        meta = _read_metadata(args.metadata)
        files = _read_files(args.files)
        patterns = _build_patterns(config, meta)
        total = len(files)
        removed = filter_files_to_unwrap(files, patterns, config.tablespace)
    except (OSError, ValueError, RestoreFilterError) as e:
        console.print(f"[bold red]x[/bold red] {escape(str(e))}")
        return 1

    if args.list_kept:
        for file in sorted(files):
            console.print(file, highlight=False, markup=False)
        return 0

    selected = ", ".join(config.only_databases) or "(system databases only)"
    console.print(f"Databases: [bold cyan]{escape(selected)}[/bold cyan]")
    console.print(
        f"  Kept [green]{len(files)}[/green] of {total} files, "
        f"skipping [yellow]{len(removed)}[/yellow]"
    )

    if removed:
        table = Table(title="Skipped files")
        table.add_column("Path", style="dim")
        for file in sorted(removed):
            table.add_row(escape(file))
        console.print()
        console.print(table)

    return 0


# ============================================================================
# Entry point
# ============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="selective-restore",
        description="Preview selective restore of PostgreSQL databases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--metadata",
        required=True,
        help="JSON file mapping database name to oid",
    )
    common.add_argument(
        "--db", "-d",
        action="append",
        dest="databases",
        default=[],
        help="Database to restore (can be used multiple times)",
    )
    common.add_argument(
        "--config", "-c",
        help="TOML file with a [restore] table",
    )

    patterns_parser = subparsers.add_parser(
        "patterns",
        parents=[common],
        help="Show restore patterns",
    )
    patterns_parser.set_defaults(func=cmd_patterns)

    plan_parser = subparsers.add_parser(
        "plan",
        parents=[common],
        help="Show which files would be skipped",
    )
    plan_parser.add_argument(
        "--files", "-f",
        required=True,
        help="Text file listing archive paths, one per line",
    )
    plan_parser.add_argument(
        "--list-kept",
        action="store_true",
        help="Print the kept paths instead of a summary",
    )
    plan_parser.set_defaults(func=cmd_plan)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
