"""
Exposes the version of coordtransform
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Used when running from a source checkout that was never installed. Reads the
    repo-root VERSION file, if there is one.
    """
    version_file = Path(__file__).resolve().parents[1] / "VERSION"
    if not version_file.is_file():
        return None

    return version_file.read_text(encoding="utf-8").strip()


try:
    __version__ = version("coordtransform")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
