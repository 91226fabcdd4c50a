from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .content import HTMLContent, split_front_matter
from .render import DEFAULT_TEMPLATE_PATH, markdown_to_html, read_template, render_template, write_text

TEMPLATE_FIELDS = ("title", "description", "style", "header", "footer", "content")


@dataclass(frozen=True)
class PageContext:
    """Inputs shared by every page of one build, computed once up front."""

    root_marker: str
    template: str
    style: Optional[str] = None
    header_html: Optional[str] = None
    footer_html: Optional[str] = None

    @classmethod
    def with_default_template(cls, root_marker: str, **kwargs) -> "PageContext":
        return cls(root_marker, read_template(DEFAULT_TEMPLATE_PATH), **kwargs)


def template_data(
    page: HTMLContent,
    style: Optional[str] = None,
    header_html: Optional[str] = None,
    footer_html: Optional[str] = None,
) -> dict[str, str]:
    front_matter = page.front_matter
    title = front_matter.title if front_matter else None
    description = front_matter.description if front_matter else None
    return {
        "title": title or "",
        "description": description or "",
        "style": style or "",
        "header": header_html or "",
        "footer": footer_html or "",
        "content": page.html,
    }


def validate_template(template: str) -> None:
    render_template(template, **{name: "" for name in TEMPLATE_FIELDS})


def assemble_page(raw_markdown: str, context: PageContext) -> str:
    content = split_front_matter(raw_markdown)
    page = markdown_to_html(content, context.root_marker)
    data = template_data(page, context.style, context.header_html, context.footer_html)
    return render_template(context.template, **data)


def output_path_for(source: Path, content_dir: Path, output_dir: Path) -> Path:
    return output_dir / source.relative_to(content_dir).with_suffix(".html")


def build_page(source: Path, content_dir: Path, output_dir: Path, context: PageContext) -> Path:
    raw_text = source.read_text(encoding="utf-8")
    page_html = assemble_page(raw_text, context)
    target = output_path_for(source, content_dir, output_dir)
    write_text(target, page_html)
    return target
