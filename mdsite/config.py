from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import yaml

from .render import render_markdown

try:
    import tomllib as toml
except ImportError:
    import tomli as toml


CONFIG_ERRORS = (toml.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError)


def parse_config_text(text: str, suffix: str) -> object:
    if suffix == ".toml":
        return toml.loads(text)
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(text) or {}
    return json.loads(text)


def load_config(path: Path) -> dict:
    """Read site options from a TOML, YAML or JSON file; missing means none."""
    if not path.exists():
        return {}
    try:
        data = parse_config_text(path.read_text(encoding="utf-8"), path.suffix.lower())
    except CONFIG_ERRORS as exc:
        print(f"Invalid config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"Config file must hold a mapping of options: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def resolve_style(path: Path) -> str:
    if not path.is_file():
        print(f"Stylesheet not found: {path}. Pages will have no inline style.", file=sys.stderr)
        return ""
    return path.read_text(encoding="utf-8")


def resolve_snippet_html(path: Path, root_marker: str) -> Optional[str]:
    """Render a shared header/footer markdown file, or None if unavailable.

    Snippets go straight through the markdown renderer; front matter is not
    stripped from them.
    """
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Could not read {path}: {exc}", file=sys.stderr)
        return None
    return render_markdown(text, root_marker)
