from __future__ import annotations

from importlib import metadata
from pathlib import Path


def get_version() -> str:
    try:
        return metadata.version("genkeys")
    except metadata.PackageNotFoundError:
        # running from a source checkout
        version_file = Path(__file__).resolve().parents[2] / "VERSION"
        if version_file.exists():
            return version_file.read_text(encoding="utf-8").strip()
        return "0.0.0"
