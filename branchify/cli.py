"""Command-line interface for branchify."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import jsonschema
import yaml

from branchify.engine import branchify
from branchify.loader import load_input_yaml
from branchify.logging import get_logger, set_global_log_level
from branchify.managers import default_registry

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _default_results_path(path: Path) -> Path:
    """Return ``<input stem>.results.json`` in the current directory."""
    return Path(f"{path.stem}.results.json")


def _run(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    include_package_files: bool,
) -> None:
    """Consolidate the updates in an input file and export the result as JSON.

    Exits with status 1 when the input cannot be read or is invalid.
    """
    logger.info(f"Loading input from: {path}")
    start = perf_counter()

    try:
        parsed = load_input_yaml(path.read_text())
    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError, jsonschema.ValidationError) as exc:
        logger.error(f"Invalid input file {path}: {exc}")
        sys.exit(1)

    try:
        result = branchify(parsed.config, parsed.package_files)
    except ValueError as exc:
        logger.error(f"Failed to consolidate updates: {exc}")
        sys.exit(1)

    n = len(result.branches)
    logger.info(
        f"Consolidated into {n} {_plural(n, 'branch', 'branches')} "
        f"in {perf_counter() - start:.3f} s"
    )

    payload = result.to_dict(include_package_files=include_package_files)
    text = json.dumps(payload, indent=2, default=str)

    if not no_results:
        out_path = results_override or _default_results_path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Results written to: {out_path}")

    if stdout:
        print(text)


def _show_managers(paths: List[str]) -> None:
    """Print the manager table and, for each path, the managers matching it."""
    registry = default_registry()
    rows = []
    for d in registry.descriptors():
        rows.append(
            [
                d.name,
                d.language or "-",
                ", ".join(d.supported_datasources) or "-",
                d.default_config.versioning or "-",
                ", ".join(d.default_config.file_match),
            ]
        )
    print("Managers:")
    print(
        _format_table(
            ["Name", "Language", "Datasources", "Versioning", "File match"], rows
        )
    )
    if paths:
        print("\nMatches:")
        print(
            _format_table(
                ["Path", "Managers"],
                [[p, ", ".join(registry.match_file(p)) or "-"] for p in paths],
            )
        )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``branchify`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="branchify",
        description="Consolidate dependency updates into branch proposals.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,managers}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run", help="Consolidate the updates of an input file"
    )
    run_parser.add_argument("input", type=Path, help="Path to input YAML or JSON")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to JSON file (default: <input_name>.results.json)",
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )
    run_parser.add_argument(
        "--package-files",
        action="store_true",
        help="Include the scanned package files in every exported branch",
    )

    managers_parser = subparsers.add_parser(
        "managers", help="List manager descriptors and match file paths"
    )
    managers_parser.add_argument(
        "paths", nargs="*", help="File paths to match against manager patterns"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(
            path=args.input,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            include_package_files=args.package_files,
        )
    elif args.command == "managers":
        _show_managers(args.paths)


if __name__ == "__main__":
    main()
