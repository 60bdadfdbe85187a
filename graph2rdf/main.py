#!/usr/bin/env python3
"""
graph2rdf CLI - Exports a page graph to an RDF file.

Usage:
    python -m graph2rdf.main --help
    python -m graph2rdf.main graph.ttl
    python -m graph2rdf.main --format n-triples --graph ./my-graph graph.nt
"""

import argparse
import logging
import sys

import pyfiglet
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from graph2rdf import __version__
from graph2rdf.config.settings import Settings, load_config
from graph2rdf.pipeline import ExportPipeline, ExportResult
from graph2rdf.utils.logging import setup_colored_logging

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings, verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity flags, falling back to the configured level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, settings.logging.level)

    setup_colored_logging(level=level, log_file=settings.logging.log_file)


def print_banner() -> None:
    """Print the application banner."""
    print(pyfiglet.figlet_format("graph2rdf", font="slant", width=100))


def print_config_summary(settings: Settings, args: argparse.Namespace) -> None:
    """Print configuration summary."""
    config = settings.graph
    print("\n📋 Configuration:")
    print("─" * 40)
    print(f"  Graph: {args.graph or settings.paths.graph_dir}")
    print(f"  Base url: {config.base_url}")
    print(f"  Format: {config.format}")
    print(f"  Url property: {config.url_property}")
    print(f"  Additional pages: {', '.join(sorted(config.additional_pages)) or 'none'}")
    print(f"  Output file: {args.file}")
    print("─" * 40)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="graph2rdf",
        description="graph2rdf - Export classes, properties and class instances of a page graph to RDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export the configured graph to Turtle
  graph2rdf graph.ttl

  # Export another graph directory as N-Triples
  graph2rdf --graph ./docs-graph --format n-triples graph.nt

  # Use a specific configuration file
  graph2rdf --config ./export.yaml graph.ttl
        """,
    )

    parser.add_argument("file", help="Output file for the serialized graph")

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="config.yaml",
        help="YAML configuration file (default: config.yaml)",
    )

    parser.add_argument(
        "--graph",
        "-g",
        type=str,
        default=None,
        help="Graph directory or JSON/YAML page list (default: from config)",
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["turtle", "n-triples", "n-quads", "trig", "json-ld", "xml"],
        default=None,
        help="Output format (default: from config)",
    )

    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Base url for all pages (default: from config)",
    )

    # Logging
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (very verbose)",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Load settings and apply CLI overrides."""
    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.format:
        overrides["format"] = args.format

    return load_config(args.config, graph_overrides=overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    if args.quiet:
        setup_logging(settings)
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(settings, verbose=args.verbose, debug=args.debug)
        print_banner()
        print_config_summary(settings, args)

    try:
        pipeline = ExportPipeline(settings=settings, graph_path=args.graph)
        result: ExportResult = pipeline.execute(args.file)
        logger.info("Writing file %s", result.output_file)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.quiet:
            logging.disable(logging.NOTSET)

    if not args.quiet:
        result.print_summary()

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
