from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import yaml

from .errors import FrontMatterError

DELIMITER = "---"


@dataclass(frozen=True)
class FrontMatter:
    """Metadata block of a document.

    Arbitrary keys are kept as parsed; only ``title`` and
    ``meta_description`` are ever read.
    """

    data: dict = field(default_factory=dict)

    def get_str(self, key: str) -> Optional[str]:
        value = self.data.get(key)
        return value if isinstance(value, str) else None

    @property
    def title(self) -> Optional[str]:
        return self.get_str("title")

    @property
    def description(self) -> Optional[str]:
        return self.get_str("meta_description")


@dataclass(frozen=True)
class MarkdownContent:
    front_matter: Optional[FrontMatter]
    body: str


@dataclass(frozen=True)
class HTMLContent:
    front_matter: Optional[FrontMatter]
    html: str


def parse_metadata(text: str) -> FrontMatter:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Failed to parse YAML front matter: {exc}") from exc
    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return FrontMatter(data)


def split_front_matter(text: str) -> MarkdownContent:
    if not text.startswith(DELIMITER):
        return MarkdownContent(None, text)

    parts = text.split(DELIMITER, 2)
    if len(parts) != 3:
        return MarkdownContent(None, text)

    _, meta_text, rest = parts
    return MarkdownContent(parse_metadata(meta_text), rest.lstrip())
