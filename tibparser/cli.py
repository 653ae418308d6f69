"""Command-line interface for the phrase parser."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .config import CONFIG_ENV_VAR, Config, DictionaryConfig
from .exceptions import EmptyPhraseError, TibParserError
from .pipeline import ParsePipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--solr-url",
        type=str,
        help="Dictionary Solr select URL (overrides the config file)",
    )
    parser.add_argument(
        "--wordlist",
        type=Path,
        help="CSV wordlist to use instead of Solr (columns: id, name_tibt, name_latin)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tibparser",
        description="Split Tibetan or Wylie phrases into dictionary headwords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a single phrase
  tibparser parse "chos sku ngo bo nyid"

  # Parse offline against a wordlist, with the debug trace
  tibparser parse --wordlist data/wordlist.csv --debug "chos sku"

  # Parse a file of phrases into a CSV
  tibparser batch --input phrases.txt --output parsed.csv

  # Run the HTTP API
  tibparser serve --port 8000
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parse_parser = subparsers.add_parser("parse", help="Parse one phrase and print JSON")
    parse_parser.add_argument("text", help="Phrase in Tibetan script or Wylie")
    parse_parser.add_argument(
        "--debug",
        action="store_true",
        help="Include the lookup trace in the output",
    )
    add_common_arguments(parse_parser)

    batch_parser = subparsers.add_parser("batch", help="Parse a file of phrases into CSV")
    batch_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Text file with one phrase per line, or JSONL with a 'text' field",
    )
    batch_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="CSV file to write, one row per match",
    )
    batch_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar",
    )
    add_common_arguments(batch_parser)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, help="Bind address (default from config)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default from config)")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload; useful during local development",
    )
    add_common_arguments(serve_parser)

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    updates = {}
    if args.solr_url:
        updates["base_url"] = args.solr_url
        updates["backend"] = "solr"
    if args.wordlist:
        updates["wordlist_path"] = args.wordlist
        updates["backend"] = "wordlist"
    if updates:
        # Re-validate so URL checks apply to overrides too
        data = config.dictionary.model_dump()
        data.update(updates)
        config.dictionary = DictionaryConfig(**data)

    if getattr(args, "host", None):
        config.server.host = args.host
    if getattr(args, "port", None):
        config.server.port = args.port
    return config


def handle_parse(args: argparse.Namespace, config: Config) -> int:
    """Handle parse command."""
    pipeline = ParsePipeline.from_config(config)
    try:
        result = pipeline.parse(args.text, debug=args.debug)
    except EmptyPhraseError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 1
    finally:
        pipeline.close()

    print(json.dumps(result.to_dict(include_debug=args.debug), ensure_ascii=False, indent=2))
    return 0


def handle_batch(args: argparse.Namespace, config: Config) -> int:
    """Handle batch command."""
    pipeline = ParsePipeline.from_config(config)
    try:
        count = pipeline.process_file(
            args.input, args.output, show_progress=not args.no_progress
        )
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    finally:
        pipeline.close()

    print(f"\nParsed {count} phrases into {args.output}")
    return 0


def handle_serve(args: argparse.Namespace, config: Config) -> int:
    """Handle serve command."""
    from .webapi.__main__ import run_server

    if args.config:
        os.environ[CONFIG_ENV_VAR] = str(args.config.resolve())
    log_level = "debug" if args.verbose else "info"
    run_server(
        config.server.host,
        config.server.port,
        reload=args.reload,
        log_level=log_level,
        config=config,
    )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    handlers = {
        "parse": handle_parse,
        "batch": handle_batch,
        "serve": handle_serve,
    }
    try:
        return handlers[args.command](args, config)
    except TibParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("%s failed", args.command)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
