from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from lingopress.app.parser import Parser
from lingopress.domain.errors import LingopressError
from lingopress.settings import get_settings, settings_from_env

out = Console(soft_wrap=True, emoji=False)
err = Console(stderr=True)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="lingopress", description="Parse and render localized content files.")
    p.add_argument("--verbose", "-v", action="store_true", help="Log engine activity to stderr")

    sub = p.add_subparsers(dest="command", required=True)

    parse_p = sub.add_parser("parse", help="Print the parsed content as JSON")
    parse_p.add_argument("file", type=Path)
    parse_p.add_argument("--meta-tags", type=str, default=None, help='Metadata markers as "START,END"')

    body_p = sub.add_parser("body", help="Print the body filtered by locale")
    body_p.add_argument("file", type=Path)
    body_p.add_argument("--locale", "-l", action="append", default=None, help="Locale to keep (repeatable, * for all)")
    body_p.add_argument("--content-tags", type=str, default=None, help='Content markers as "START,END"')

    render_p = sub.add_parser("render", help="Render the body to HTML")
    render_p.add_argument("file", type=Path)
    render_p.add_argument("--locale", "-l", type=str, default=None)
    render_p.add_argument("--no-toc", action="store_true", help="Skip the table of contents filter")
    render_p.add_argument("--no-links", action="store_true", help="Skip the autolink filter")
    render_p.add_argument("--no-emoji", action="store_true", help="Skip the emoji filter")
    render_p.add_argument("--no-image-max-width", action="store_true", help="Skip the image max width filter")
    render_p.add_argument("--asset-root", type=str, default=None, help="Root URL for emoji images")

    return p.parse_args(argv)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err, show_path=False)],
    )


def _run(args: argparse.Namespace, parser: Parser) -> None:
    raw = args.file.read_text(encoding="utf-8")

    if args.command == "parse":
        content = parser.parse(raw, {"meta_tags": args.meta_tags})
        out.print_json(json.dumps(content.as_dict(), ensure_ascii=False))
        return

    content = parser.parse(raw)

    if args.command == "body":
        engine = parser.create_engine(get_settings().parsing_engine, "parsing")
        body = engine.filter_content(content, args.locale, {"content_tags": args.content_tags})
        out.print(body, markup=False, highlight=False)
        return

    options = {
        "locale": args.locale,
        "toc": not args.no_toc,
        "links": not args.no_links,
        "emoji": not args.no_emoji,
        "image_max_width": not args.no_image_max_width,
    }
    if args.asset_root:
        options["pipeline_options"] = {"asset_root": args.asset_root}

    out.print(parser.render(content, options), markup=False, highlight=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _setup_logging(args.verbose)
    settings_from_env()

    try:
        _run(args, Parser.instance())
    except (LingopressError, OSError) as e:
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
