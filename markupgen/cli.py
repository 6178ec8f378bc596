"""Command-line interface for markupgen."""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import Iterable, Optional

from .context import XmlContext
from .diagnostics import DiagnosticLog
from .dom_model import write_dom
from .example import write_example_page
from .models import load_document


def _emit(markup: str, output: Optional[str]) -> None:
    if output is None:
        sys.stdout.write(markup)
        return
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markup, encoding="utf-8")


def _handle_render(args: argparse.Namespace) -> None:
    document = load_document(Path(args.input))
    config = document.config
    closing_slash = config.closing_slash if args.closing_slash is None else args.closing_slash
    show_warnings = config.warnings or args.warnings

    log = DiagnosticLog(forward=sys.stderr if show_warnings else None)
    buffer = io.StringIO()
    with XmlContext(out=buffer, warn=log, closing_slash=closing_slash) as ctx:
        if config.doctype:
            ctx.raw(config.doctype)
        write_dom(ctx, document.to_dom())
    _emit(buffer.getvalue(), args.output)

    if args.strict and log:
        sys.stderr.write(f"{len(log)} diagnostic(s) reported while rendering {args.input}\n")
        sys.exit(1)


def _handle_example(args: argparse.Namespace) -> None:
    buffer = io.StringIO()
    warn = sys.stderr if args.warnings else None
    with XmlContext(out=buffer, warn=warn, closing_slash=False) as ctx:
        write_example_page(ctx)
    _emit(buffer.getvalue() + "\n", args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markupgen",
        description="Write XML/HTML documents with nesting-checked tags.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML document file.",
        description="Validate a YAML document file and write its markup.",
    )
    render_parser.add_argument("input", help="Path to the document YAML file.")
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write the markup to (default: stdout).",
    )
    slash_group = render_parser.add_mutually_exclusive_group()
    slash_group.add_argument(
        "--closing-slash",
        dest="closing_slash",
        action="store_true",
        default=None,
        help="Write empty tags as <tag/>.",
    )
    slash_group.add_argument(
        "--no-closing-slash",
        dest="closing_slash",
        action="store_false",
        help="Write empty tags as <tag> (HTML5 void elements).",
    )
    render_parser.add_argument(
        "--warnings",
        action="store_true",
        help="Print diagnostics to stderr.",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any diagnostic was reported.",
    )
    render_parser.set_defaults(func=_handle_render)

    example_parser = subparsers.add_parser(
        "example",
        help="Write the sample HTML5 page.",
        description="Write a sample page that exercises escaping and tag closing.",
    )
    example_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write the page to (default: stdout).",
    )
    example_parser.add_argument(
        "--warnings",
        action="store_true",
        help="Print diagnostics to stderr.",
    )
    example_parser.set_defaults(func=_handle_example)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
