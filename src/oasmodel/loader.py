"""Load documents from a URL, local file, or stdin, and save them to disk.

This module handles all I/O around the codec. It fetches raw bytes and
hands them to :func:`~oasmodel.codec.decode_document`; the codec itself
never touches files or the network.

The two public functions are:

* :func:`load_document` -- Load and decode a document from any supported source.
* :func:`save_document` -- Encode a document and write it atomically.

Only JSON is read and written. YAML sources are rejected by the decoder like
any other malformed text.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import httpx

from oasmodel.codec import decode_document, encode_document
from oasmodel.config import atomic_write
from oasmodel.exceptions import DocumentLoadError
from oasmodel.models import Document

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def load_document(source: str, timeout: float = DEFAULT_TIMEOUT) -> Document:
    """Load a document from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.
        timeout: Request timeout in seconds for URL sources.

    Returns:
        The decoded document.

    Raises:
        DocumentLoadError: If the source cannot be read.
        DecodeError: If the content is not a valid document.
    """
    if source == "-":
        content = _read_stdin()
    elif source.startswith(("http://", "https://")):
        content = _read_url(source, timeout)
    else:
        content = _read_file(source)

    logger.debug("Decoding %d bytes from %s", len(content), source)
    return decode_document(content)


def _read_stdin() -> bytes:
    """Read all of stdin.

    Raises:
        DocumentLoadError: If stdin cannot be read or is empty.
    """
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise DocumentLoadError("No input received from stdin")

    return content.encode("utf-8")


def _read_url(url: str, timeout: float) -> bytes:
    """Fetch a document from an HTTP(S) URL.

    Raises:
        DocumentLoadError: If the request fails or returns an error status.
    """
    logger.debug("Fetching document from %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DocumentLoadError(
            f"HTTP {exc.response.status_code} fetching document from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise DocumentLoadError(f"Failed to fetch document from {url}: {exc}") from exc

    return response.content


def _read_file(path: str) -> bytes:
    """Read a document from a local file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, or empty.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DocumentLoadError(f"Document file not found: {path}")

    logger.debug("Reading document from %s", file_path)
    try:
        content = file_path.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read document file {path}: {exc}") from exc

    if not content.strip():
        raise DocumentLoadError(f"Document file is empty: {path}")

    return content


def save_document(
    document: Document,
    path: Union[str, Path],
    indent: Optional[int] = 2,
) -> Path:
    """Encode *document* and write it atomically to *path*.

    Args:
        document: The document to write.
        path: Destination file. Parent directories are created.
        indent: Indentation passed to :func:`~oasmodel.codec.encode_document`.

    Returns:
        The path written to.
    """
    target = Path(path)
    text = encode_document(document, indent=indent).decode("utf-8")
    atomic_write(target, text + "\n")
    logger.debug("Wrote document to %s", target)
    return target
