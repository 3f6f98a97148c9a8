"""Command-line interface for nlex."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nlex.errors import LexError

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    keyword_operators: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="nlex",
        description="Tokenize a source file and print the token stream",
    )
    p.add_argument("input", help="Input file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover nlex.toml)",
    )
    p.add_argument(
        "--no-keyword-operators",
        action="store_true",
        help="Lex AND/OR/XOR/XAND as plain identifiers",
    )
    p.add_argument("--debug", action="store_true", help="Debug logging and token dump to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "nlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    keyword_operators = True
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_keywords = cfg_lexer.get("keyword_operators")
        if isinstance(cfg_keywords, bool):
            keyword_operators = cfg_keywords
    if args.no_keyword_operators:
        keyword_operators = False

    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        output_format = str(cfg_output["format"])
    if args.format is not None:
        output_format = args.format
    if output_format not in FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid output format {output_format!r} (expected one of {', '.join(FORMATS)})"
        )

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        keyword_operators=keyword_operators,
        debug=args.debug,
    )


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize the input, returning the rendered token stream."""
    from nlex.debug import dump_tokens, format_tokens
    from nlex.lexer import tokenize

    if options.input_file is None:
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        source = options.input_file.read_text(encoding="utf-8")
        filename = str(options.input_file)

    tokens = tokenize(source, filename, keyword_operators=options.keyword_operators)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    if options.output_format == "json":
        data = [
            {"kind": t.kind.name, "text": t.text, "start": t.start, "end": t.end}
            for t in tokens
        ]
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    return format_tokens(tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = tokenize_file(options)
    except LexError as exc:
        filename = str(options.input_file) if options.input_file else "<stdin>"
        print(exc.format(filename), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
