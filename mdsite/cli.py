from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from .config import load_config, resolve_snippet_html, resolve_style
from .errors import SiteError, TemplateRenderError
from .pages import PageContext, build_page, validate_template
from .render import DEFAULT_TEMPLATE_PATH, copy_static, read_template
from .utils import expand_path, parse_bool, reset_output_dir

STATIC_DIR_NAME = "static"
SKIPPED_FILES = {"nav.md"}


def find_documents(content_dir: Path) -> list[Path]:
    static_dir = content_dir / STATIC_DIR_NAME
    documents = []
    for path in sorted(content_dir.rglob("*.md"), key=lambda p: p.as_posix()):
        if not path.is_file() or path.name in SKIPPED_FILES:
            continue
        if path.is_relative_to(static_dir):
            continue
        documents.append(path)
    return documents


def build_site(args: argparse.Namespace) -> list[tuple[Path, Exception]]:
    """Render every document and return the ones that failed.

    Template errors abort the build immediately; other per-document errors
    are collected unless ``args.fail_fast`` is set.
    """
    content_dir = expand_path(args.content)
    if not content_dir.is_dir():
        print(f"Content directory not found: {content_dir}", file=sys.stderr)
        sys.exit(1)
    output_dir = expand_path(args.output)
    root_marker = content_dir.name

    shared = {
        "style": resolve_style(expand_path(args.style)),
        "header_html": resolve_snippet_html(expand_path(args.header), root_marker),
        "footer_html": resolve_snippet_html(expand_path(args.footer), root_marker),
    }
    if args.template:
        template_path = expand_path(args.template)
        if not template_path.is_file():
            print(f"Template not found: {template_path}", file=sys.stderr)
            sys.exit(1)
        context = PageContext(root_marker, read_template(template_path), **shared)
    else:
        template_path = DEFAULT_TEMPLATE_PATH
        context = PageContext.with_default_template(root_marker, **shared)
    try:
        validate_template(context.template)
    except TemplateRenderError as exc:
        print(f"Invalid template {template_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    reset_output_dir(output_dir, content_dir)

    static_dir = content_dir / STATIC_DIR_NAME
    if static_dir.is_dir():
        copy_static(static_dir, output_dir / STATIC_DIR_NAME)

    failures: list[tuple[Path, Exception]] = []
    for source in find_documents(content_dir):
        try:
            target = build_page(source, content_dir, output_dir, context)
        except TemplateRenderError as exc:
            print(f"Failed to render template for {source}: {exc}", file=sys.stderr)
            sys.exit(1)
        except SiteError as exc:
            print(f"Failed to process markdown file {source}: {exc.kind} error: {exc}", file=sys.stderr)
            failures.append((source, exc))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Failed to process markdown file {source}: I/O error: {exc}", file=sys.stderr)
            failures.append((source, exc))
        else:
            if args.verbose:
                print(f"Wrote {target}")
        if failures and args.fail_fast:
            break
    return failures


def main(argv: Optional[list[str]] = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Render a directory of Markdown files into a static site.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument(
        "content",
        nargs="?",
        default=cfg_str("content", "content"),
        help="Directory containing the site's content.",
    )
    parser.add_argument("--header", default=cfg_str("header", "header.md"), help="Path to the site's header.")
    parser.add_argument("--footer", default=cfg_str("footer", "footer.md"), help="Path to the site's footer.")
    parser.add_argument("--style", default=cfg_str("style", "style.css"), help="Path to the site's stylesheet.")
    parser.add_argument(
        "-o",
        "--output",
        default=cfg_str("output", "_site"),
        help="Site output directory. Will be created if it doesn't already exist.",
    )
    parser.add_argument(
        "--template",
        default=cfg_str("template", ""),
        help="Page template file (defaults to the built-in template).",
    )
    parser.add_argument(
        "--fail-fast",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("fail_fast", False),
        help="Stop at the first document that fails to build.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=cfg_bool("verbose", False),
        help="Print every page written.",
    )
    args = parser.parse_args(argv)

    start = time.perf_counter()
    failures = build_site(args)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    if failures:
        print(f"{len(failures)} markdown file(s) failed to build:", file=sys.stderr)
        for source, _ in failures:
            print(f"  {source}", file=sys.stderr)
        return 1
    print(f"Site generated in: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
