"""Command-line entry point for the class-diagram parser.

Usage::

    python -m diagram_ast.cli model.mmd
    python -m diagram_ast.cli model.mmd --json
    python -m diagram_ast.cli model.mmd --json --output classes.json
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from diagram_ast.config import ParserConfig
from diagram_ast.parser import DiagramParseError, parse_diagram_file, result_to_dict
from diagram_ast.utils import (
    console,
    print_class_table,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    save_json,
)


def _build_config(args) -> ParserConfig:
    config = ParserConfig.load(Path(args.config)) if args.config else ParserConfig.from_env()
    overrides = {}
    if args.flush_unterminated:
        overrides["flush_unterminated_class"] = True
    if args.lowercase_members:
        overrides["preserve_member_case"] = False
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m diagram_ast.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse a class diagram into an AST of classes and members",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m diagram_ast.cli model.mmd\n"
            "  python -m diagram_ast.cli model.mmd --json -o classes.json\n"
        ),
    )
    parser.add_argument("diagram", help="Path to the class diagram file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the class mapping as JSON instead of tables",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write JSON to this file instead of stdout (implies --json)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="ParserConfig JSON file (default: read DIAGRAM_AST_* environment variables)",
    )
    parser.add_argument(
        "--flush-unterminated",
        action="store_true",
        help="Keep a class block left open at end of input",
    )
    parser.add_argument(
        "--lowercase-members",
        action="store_true",
        help="Lower-case member names",
    )

    args = parser.parse_args(argv)

    diagram_path = Path(args.diagram)
    if not diagram_path.exists():
        console.print(f"[bold red]Error:[/bold red] Diagram file not found: {diagram_path}")
        sys.exit(1)

    config = _build_config(args)

    try:
        result = asyncio.run(parse_diagram_file(diagram_path, config))
    except (DiagramParseError, ValueError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    if not result:
        print_warning(f"No classes found in {diagram_path.name}")

    if args.output:
        asyncio.run(save_json(result_to_dict(result), args.output))
        print_success(f"Wrote {len(result)} classes to {args.output}")
    elif args.json:
        console.print_json(json.dumps(result_to_dict(result)))
    else:
        print_class_table(result)
        print_summary_table(
            {
                "Classes": str(len(result)),
                "Attributes": str(sum(len(c.attributes) for c in result.values())),
                "Functions": str(sum(len(c.functions) for c in result.values())),
            },
            title=diagram_path.name,
        )


if __name__ == "__main__":
    main()
