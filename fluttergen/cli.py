"""fluttergen command-line entry point.

Usage::

    fluttergen --project-name demo_app --architecture MVC --module "Network Layer"
    fluttergen --config project.yaml --output ./apps
    python -m fluttergen --config project.json --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import GeneratorSettings
from .engine.errors import InvalidConfig, PlanCollision
from .engine.models import Architecture, StateManagement
from .reporting import ConsoleReporter
from .scaffolder.generator import ProjectGenerator
from .utils import (
    console,
    load_project_file,
    print_error,
    print_summary_table,
    print_warning,
    split_tags,
)

DEFAULT_ARCHITECTURE = Architecture.CLEAN.value
DEFAULT_STATE_MANAGEMENT = StateManagement.PROVIDER.value

EXIT_INVALID_CONFIG = 1
EXIT_PLAN_COLLISION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fluttergen",
        description="fluttergen -- Flutter project scaffolding generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fluttergen --project-name demo_app --bundle-identifier com.example.demo\n"
            "  fluttergen --project-name shop --architecture Feature-Driven \\\n"
            "      --state-management Bloc --feature Dashboard --module 'Network Layer'\n"
            "  fluttergen --config project.yaml -o ./apps --dry-run\n"
        ),
    )

    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Project configuration file (.json, .yaml or .yml)",
    )
    parser.add_argument("--project-name", default=None, help="Project name (snake_case)")
    parser.add_argument(
        "--bundle-identifier", "--org",
        dest="bundle_identifier",
        default=None,
        help="Organisation / bundle identifier, e.g. com.example.app",
    )
    parser.add_argument(
        "--architecture",
        default=None,
        help=f"One of: {', '.join(a.value for a in Architecture)} (default: {DEFAULT_ARCHITECTURE})",
    )
    parser.add_argument(
        "--state-management",
        default=None,
        help=(
            f"One of: {', '.join(s.value for s in StateManagement)} "
            f"(default: {DEFAULT_STATE_MANAGEMENT})"
        ),
    )
    parser.add_argument(
        "--feature",
        action="append",
        default=None,
        help="Feature to include; repeat or comma-separate for several",
    )
    parser.add_argument(
        "--module",
        action="append",
        default=None,
        help="Module to include; repeat or comma-separate for several",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the generated project (default: .)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and print the plan without writing anything",
    )
    parser.add_argument(
        "--force-default-feature",
        action="store_true",
        help="Always include the Authentication feature",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print every step")
    return parser


def collect_raw_config(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the configuration file (if any) with command-line flags.

    Flags win over file values; architecture and state management fall back
    to the front-end defaults when neither source sets them.
    """
    raw: dict[str, Any] = load_project_file(args.config) if args.config else {}

    if args.project_name is not None:
        raw["project_name"] = args.project_name
    if args.bundle_identifier is not None:
        raw["bundle_identifier"] = args.bundle_identifier
    if args.architecture is not None:
        raw["architecture"] = args.architecture
    if args.state_management is not None:
        raw["state_management"] = args.state_management
    if args.feature is not None:
        raw["features"] = split_tags(args.feature)
    if args.module is not None:
        raw["modules"] = split_tags(args.module)

    raw.setdefault("architecture", DEFAULT_ARCHITECTURE)
    raw.setdefault("state_management", DEFAULT_STATE_MANAGEMENT)
    return raw


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``fluttergen`` / ``python -m fluttergen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = GeneratorSettings.from_env()
    updates: dict[str, Any] = {}
    if args.output is not None:
        updates["output_dir"] = Path(args.output)
    if args.dry_run:
        updates["dry_run"] = True
    if args.force_default_feature:
        updates["force_default_feature"] = True
    if args.verbose:
        updates["verbose"] = True
    if updates:
        settings = settings.model_copy(update=updates)

    try:
        raw = collect_raw_config(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print_error(f"Error: could not read configuration: {exc}")
        sys.exit(EXIT_INVALID_CONFIG)

    reporter = ConsoleReporter(console, verbose=settings.verbose)
    generator = ProjectGenerator(settings, reporter)

    try:
        result = generator.plan(raw)
        project_root = asyncio.run(generator.write(result))
    except InvalidConfig as exc:
        print_error(f"Error: {exc}")
        sys.exit(EXIT_INVALID_CONFIG)
    except PlanCollision as exc:
        print_error(f"Planning error (please report this): {exc}")
        sys.exit(EXIT_PLAN_COLLISION)

    summary = result.plan.summary()
    print_summary_table(
        {
            "Project": result.config.project_name,
            "Location": str(project_root),
            "Architecture": result.config.architecture.value,
            "State management": result.config.state_management.value,
            "Features": ", ".join(result.config.features),
            "Modules": ", ".join(result.config.modules) or "-",
            "Android id": result.identifiers.android or "-",
            "iOS id": result.identifiers.ios or "-",
            "Directories": str(summary["directories"]),
            "Files": str(summary["files"]),
        },
        title="fluttergen",
    )
    if settings.dry_run:
        print_warning("Dry run: no files were written.")
        if settings.verbose:
            for directory in result.plan.directories:
                console.print(f"  [cyan]{directory}/[/cyan]")
            for path in result.plan.file_paths:
                console.print(f"  {path}")


if __name__ == "__main__":
    main()
