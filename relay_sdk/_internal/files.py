"""Saving results to disk and loading local files."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class UploadedFile(BaseModel):
    """Content read from a selected file."""

    content: str | bytes
    file: Path


def download(value: Any, filename: str, directory: str | Path = ".") -> Path:
    """Write ``value`` as JSON text to ``directory/filename``.

    Returns:
        The path of the written file.
    """
    path = Path(directory) / filename
    path.write_text(json.dumps(value), encoding="utf-8")
    logger.debug("Saved %s", path)
    return path


def upload_as_text(path: str | Path | None) -> UploadedFile | None:
    """Read the selected file as UTF-8 text.

    Returns:
        The file content, or None when no file was selected.
    """
    if not path:
        logger.error("No file selected")
        return None
    file = Path(path)
    return UploadedFile(content=file.read_text(encoding="utf-8"), file=file)


def upload_as_bytes(path: str | Path | None) -> UploadedFile | None:
    """Read the selected file as raw bytes.

    Returns:
        The file content, or None when no file was selected.
    """
    if not path:
        logger.error("No file selected")
        return None
    file = Path(path)
    return UploadedFile(content=file.read_bytes(), file=file)
