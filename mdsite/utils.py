from __future__ import annotations

import shutil
import sys
from pathlib import Path


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def expand_path(value: str) -> Path:
    return Path(value).expanduser().resolve()


def reset_output_dir(output_dir: Path, content_dir: Path) -> None:
    output_resolved = output_dir.resolve()
    if output_resolved == Path.cwd().resolve():
        print("Refusing to clean the current working directory.", file=sys.stderr)
        sys.exit(1)
    if content_dir.resolve().is_relative_to(output_resolved):
        print("Refusing to clean a directory containing the content directory.", file=sys.stderr)
        sys.exit(1)
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
