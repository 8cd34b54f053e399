# utils/uploads.py
"""Disk layout for uploaded images and documents.

``folder=doc`` goes to ``<storage>/doc``; any other folder value becomes a
sub-directory of ``<storage>/img``. Names are reduced to a safe character set
and an existing file is never overwritten: ``logo.png`` becomes
``logo-1.png``, ``logo-2.png`` and so on.
"""
import re
from pathlib import Path
from typing import Optional, Tuple

_FOLDER_STRIP = re.compile(r"[^a-zA-Z0-9\-_]")
_NAME_STRIP = re.compile(r"[^a-zA-Z0-9.\-_]")
_WHITESPACE = re.compile(r"\s+")

DOC_FOLDER = "doc"


def sanitize_folder(folder: Optional[str]) -> str:
    return _FOLDER_STRIP.sub("", folder or "")


def sanitize_filename(name: str) -> str:
    cleaned = _NAME_STRIP.sub("", _WHITESPACE.sub("-", Path(name or "").name))
    # Leading dots would make hidden files (or "..")
    cleaned = cleaned.lstrip(".")
    return cleaned or "file"


def target_dir(storage_root: Path, folder: Optional[str]) -> Tuple[Path, str]:
    """Directory to write into and its URL prefix (``img/<folder>`` or ``doc``)."""
    if folder == DOC_FOLDER:
        return storage_root / "doc", "doc"
    sub = sanitize_folder(folder)
    if sub:
        return storage_root / "img" / sub, f"img/{sub}"
    return storage_root / "img", "img"


def unique_path(directory: Path, filename: str) -> Path:
    candidate = directory / filename
    stem, suffix = candidate.stem, candidate.suffix
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem}-{counter}{suffix}"
        counter += 1
    return candidate
