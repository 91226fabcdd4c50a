from __future__ import annotations

import html
import re
import shutil
from pathlib import Path

import markdown

from .content import HTMLContent, MarkdownContent
from .errors import TemplateRenderError
from .links import LinkRewriterExtension

MARKDOWN_EXTENSIONS = [
    "extra",
    "smarty",
    "codehilite",
    "pymdownx.tilde",
    "pymdownx.tasklist",
]
MARKDOWN_EXTENSION_CONFIGS = {
    "codehilite": {"guess_lang": False},
    "pymdownx.tilde": {"subscript": False},
}

PLACEHOLDER_RE = re.compile(r"\{\{(\{?)\s*([A-Za-z_][\w]*)\s*(\}?)\}\}")
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "page.html"


def render_markdown(body: str, root_marker: str) -> str:
    md = markdown.Markdown(
        extensions=[*MARKDOWN_EXTENSIONS, LinkRewriterExtension(root_marker)],
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return md.convert(body)


def markdown_to_html(content: MarkdownContent, root_marker: str) -> HTMLContent:
    return HTMLContent(content.front_matter, render_markdown(content.body, root_marker))


def render_template(template: str, **context: str) -> str:
    """Fill ``{{ name }}`` (escaped) and ``{{{ name }}}`` (raw) fields.

    Values are inserted in a single pass, so text coming from a page is
    never treated as template syntax.
    """

    def repl(match: re.Match) -> str:
        open_raw, key, close_raw = match.groups()
        if bool(open_raw) != bool(close_raw):
            raise TemplateRenderError(f"Unbalanced braces in template field: {match.group(0)}")
        if key not in context:
            raise TemplateRenderError(f"Template references unknown field: {key}")
        value = context[key]
        return value if open_raw else html.escape(value)

    masked = PLACEHOLDER_RE.sub(lambda m: " " * len(m.group(0)), template)
    stray = masked.find("{{")
    if stray != -1:
        line = template.count("\n", 0, stray) + 1
        raise TemplateRenderError(f"Malformed template field on line {line}")
    return PLACEHOLDER_RE.sub(repl, template)


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, output_dir: Path) -> None:
    shutil.copytree(static_dir, output_dir, dirs_exist_ok=True)
