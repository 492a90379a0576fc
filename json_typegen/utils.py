"""Reading JSON sample text from files, URLs and streams.

The readers return raw text only. Parsing, and reporting invalid JSON with a
line and column, belongs to ``json_typegen.generate``.
"""

import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Raised when a JSON sample cannot be read from its source."""

    pass


def read_json_file(file_path: str | Path) -> tuple[str, str]:
    """Read a sample from a local file.

    Returns:
        Tuple of (source label, document text).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        JSONLoaderError: If the file is not readable UTF-8 text.
    """
    path = Path(file_path)
    logger.debug("Reading JSON sample from file %s", path)

    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Error reading file {path}: {e}") from e

    logger.info("Read %d characters from %s", len(text), path)
    return str(path), text


def fetch_json_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Download a sample over HTTP(S).

    Returns:
        Tuple of (source label, response body).

    Raises:
        JSONLoaderError: If the URL is malformed or the request fails.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching JSON sample from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request to {url} timed out after {timeout}s") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(f"HTTP {e.response.status_code} from {url}") from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Could not fetch {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning("Response from %s has content type %r", url, content_type)

    logger.info("Fetched %d characters from %s", len(response.text), url)
    return url, response.text


def read_json_stream(stream: TextIO | None = None) -> tuple[str, str]:
    """Read a sample from a text stream, standard input by default."""
    stream = sys.stdin if stream is None else stream
    try:
        text = stream.read()
    except OSError as e:
        raise JSONLoaderError(f"Error reading standard input: {e}") from e
    return "<stdin>", text


def read_json_source(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Read a sample from exactly one of a file or a URL."""
    if bool(file_path) == bool(url):
        raise JSONLoaderError("Exactly one of file_path or url must be given")
    if file_path:
        return read_json_file(file_path)
    return fetch_json_url(url, timeout)
