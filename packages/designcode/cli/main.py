"""Command-line interface for designcode.

Lists templates and generates design codes through a ``DesignCodeSession``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from designcode.core.codegen.generator import MissingRequiredFieldsError
from designcode.core.config.loader import load_engine_config
from designcode.core.session import DesignCodeSession
from designcode.core.templates.catalog import TemplateNotFoundError
from designcode.core.utils.logging import configure_logging, configure_logging_from_config

console = Console()
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
logger = logging.getLogger(__name__)


def parse_assignments(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` pairs into a value map.

    Raises:
        ValueError: If a pair has no ``=`` or an empty key.
    """
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected key=value, got {pair!r}")
        values[key.strip()] = value
    return values


def list_templates(session: DesignCodeSession) -> int:
    table = Table(title="Design code templates")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Pattern", overflow="fold")
    table.add_column("Required fields")

    for t in session.templates():
        table.add_row(t.id, t.name, t.pattern, ", ".join(f.key for f in t.required_fields))

    console.print(table)
    return 0


def generate(session: DesignCodeSession, args: argparse.Namespace) -> int:
    try:
        values = parse_assignments(args.set or [])
    except ValueError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 2

    try:
        if args.preview:
            console.print(session.preview(args.template, values), markup=False, soft_wrap=True)
            return 0

        errors = session.validate(args.template, values)
        if errors:
            console.print("[red]Cannot generate design code:[/red]")
            for err in errors:
                console.print(f"  • {err}", markup=False, soft_wrap=True)
            return 1

        result = session.generate(args.template, values)
    except TemplateNotFoundError as e:
        console.print(f"[red]ERROR: {e.args[0]}[/red]")
        return 1
    except MissingRequiredFieldsError as e:
        for err in e.errors:
            console.print(f"  • {err}", markup=False, soft_wrap=True)
        return 1

    console.print(result.code, markup=False, soft_wrap=True)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="designcode",
        description="designcode - structured design codes for print and packaging jobs",
    )
    p.add_argument("--config", default=None, help="Path to engine config (JSON or YAML)")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("templates", help="List available templates")

    gen = sub.add_parser("generate", help="Generate a design code")
    gen.add_argument("template", help="Template id (e.g. decal-label)")
    gen.add_argument(
        "--set",
        action="append",
        metavar="KEY=VALUE",
        help="Field value; repeat for each field",
    )
    gen.add_argument(
        "--preview",
        action="store_true",
        help="Render without consuming a sequence number or checking required fields",
    )

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    config = load_engine_config(args.config)
    if args.log_level:
        configure_logging(level=args.log_level)
    else:
        configure_logging_from_config(config.logging)

    with DesignCodeSession(config) as session:
        if args.cmd == "templates":
            return list_templates(session)
        return generate(session, args)


if __name__ == "__main__":
    sys.exit(main())
