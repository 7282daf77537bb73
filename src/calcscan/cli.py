"""Command-line interface for calcscan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from calcscan.errors import ConfigError, ScanError
from calcscan.tokens import Token, TokenKind

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    strict: bool
    output_format: str
    show_whitespace: bool
    show_comments: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="calcscan",
        description="Table-driven scanner for the calculator language",
    )
    p.add_argument("input", nargs="?", help="Input source file ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover calcscan.toml)",
    )
    p.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Stop at the first illegal character",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--whitespace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include whitespace tokens in the output",
    )
    p.add_argument(
        "--comments",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include comment tokens in the output (default: on)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens with spans to stderr")
    p.add_argument("--table", action="store_true", help="Print the DFA tables and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every scanned token")
    return p


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "calcscan.toml"

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", str(path)) from exc


def _config_bool(section: Any, key: str, default: bool, path: str) -> bool:
    if not isinstance(section, dict) or key not in section:
        return default
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}", path)
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = Path(".") if args.input == "-" else input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    cfg_name = str(config_path or input_dir / "calcscan.toml")

    # Scan mode: config < CLI
    strict = _config_bool(config.get("scan"), "strict", False, cfg_name)
    if args.strict is not None:
        strict = args.strict

    # Output: config < CLI
    cfg_output = config.get("output")
    output_format = "text"
    if isinstance(cfg_output, dict) and "format" in cfg_output:
        output_format = cfg_output["format"]
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"'format' must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}",
                cfg_name,
            )
    if args.format is not None:
        output_format = args.format

    show_whitespace = _config_bool(cfg_output, "whitespace", False, cfg_name)
    if args.whitespace is not None:
        show_whitespace = args.whitespace

    show_comments = _config_bool(cfg_output, "comments", True, cfg_name)
    if args.comments is not None:
        show_comments = args.comments

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        strict=strict,
        output_format=output_format,
        show_whitespace=show_whitespace,
        show_comments=show_comments,
        debug=args.debug,
    )


def read_source(input_file: Path) -> str:
    if str(input_file) == "-":
        return sys.stdin.read()
    return input_file.read_text(encoding="utf-8")


def scan_source(source: str, options: CliOptions) -> tuple[list[Token], list[ScanError]]:
    """Scan source to the end, returning the tokens and any recovered errors.

    Raises ScanError in strict mode.
    """
    from calcscan.scanner import Scanner

    scanner = Scanner(source, str(options.input_file), strict=options.strict)
    tokens = list(scanner)
    return tokens, scanner.errors


def select_tokens(tokens: list[Token], options: CliOptions) -> list[Token]:
    """Drop whitespace and comment tokens according to the output options."""
    hidden: set[TokenKind] = set()
    if not options.show_whitespace:
        hidden.add(TokenKind.WHITESPACE)
    if not options.show_comments:
        hidden.add(TokenKind.COMMENT)
    return [t for t in tokens if t.kind not in hidden]


def format_tokens(tokens: list[Token], output_format: str) -> str:
    if output_format == "json":
        records = [
            {
                "kind": t.kind.name,
                "lexeme": t.lexeme,
                "line": t.span.start.line,
                "column": t.span.start.column,
            }
            for t in tokens
        ]
        return json.dumps(records, indent=2) + "\n"
    return "".join(f"Token({t.kind.name}, {json.dumps(t.lexeme)})\n" for t in tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.table:
        from calcscan.debug import dump_table

        dump_table()
        return 0

    if args.input is None:
        print("error: an input file is required", file=sys.stderr)
        return 2

    configure_logging(args.verbose)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options.input_file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    try:
        tokens, errors = scan_source(source, options)
    except ScanError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    if options.debug:
        from calcscan.debug import dump_tokens

        dump_tokens(tokens)

    output = format_tokens(select_tokens(tokens, options), options.output_format)
    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 1 if errors else 0
