"""Command-line entry point.

Usage::

    design-to-code TravelApp --output ./output
    python -m designtocode TravelApp --templates ./templates
"""

from __future__ import annotations

import sys
from pathlib import Path

from designtocode.config import Config
from designtocode.generator import GenerationError, ProjectGenerator
from designtocode.utils import print_error, print_success, print_summary_table


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="design-to-code",
        description="Generate a source project from a design-tool export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The output directory must already hold metadata.json, tree.json,\n"
            "and optionally slices/ and images/ exported by the design tool.\n\n"
            "Examples:\n"
            "  design-to-code TravelApp\n"
            "  design-to-code TravelApp -o ./export --templates ./my-templates\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the generated project (default: $DTC_PROJECT_NAME)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory holding the design export (default: $DTC_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--templates", "-t",
        default=None,
        help="Template root directory (default: $DTC_TEMPLATE_DIR or the bundled templates)",
    )
    parser.add_argument(
        "--platform",
        default=None,
        help="Template platform subdirectory (default: ios)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress stage headers and the summary table",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``design-to-code`` and ``python -m designtocode``."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.templates:
        config.template_dir = Path(args.templates).resolve()
    if args.platform:
        config.platform = args.platform
    if args.project_name is not None:
        config.project_name = args.project_name

    generator = ProjectGenerator(config, verbose=not args.quiet)
    try:
        report = generator.generate()
    except GenerationError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if not args.quiet:
        print_summary_table(
            {
                "Project": str(report.project_dir),
                "Screens": ", ".join(report.container_names) or "-",
                "Source files": str(len(report.source_files)),
                "Asset manifests": str(len(report.asset_manifests)),
            },
            title="Generation Summary",
        )
        print_success("Project generated successfully!")
