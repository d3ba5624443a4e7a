"""
Document source: reads the saved reference page from disk.

Fetching the page is left to the update script; this module only turns a
local file into text the scanner can walk line by line.
"""

import re
from pathlib import Path
from typing import Union

from .exceptions import DocumentSourceError
from .logger import get_module_logger

logger = get_module_logger("source")

# WHATWG encoding spec: browsers silently remap these charsets.
# https://encoding.spec.whatwg.org/#names-and-labels
WHATWG_CHARSET_MAP = {
    'iso-8859-1': 'windows-1252',
    'iso8859-1': 'windows-1252',
    'latin-1': 'windows-1252',
    'latin1': 'windows-1252',
    'us-ascii': 'windows-1252',
    'ascii': 'windows-1252',
    'utf8': 'utf-8',
}


def detect_charset_from_bytes(raw_bytes: bytes) -> str:
    """
    Detect the declared charset from <meta charset=...> or
    <meta http-equiv="Content-Type" content="...; charset=..."> in the first 2 KB.

    Returns the browser-equivalent charset or 'utf-8' as default.
    """
    head_str = raw_bytes[:2048].decode('ascii', errors='ignore')

    charset = None
    m = re.search(r'<meta[^>]+charset=["\']?\s*([^\s"\';>]+)', head_str, re.IGNORECASE)
    if m:
        charset = m.group(1).strip().lower()

    if not charset:
        m = re.search(
            r'<meta[^>]+content=["\'][^"\']*charset=([^\s"\';>]+)',
            head_str, re.IGNORECASE
        )
        if m:
            charset = m.group(1).strip().lower()

    if not charset:
        return 'utf-8'
    return WHATWG_CHARSET_MAP.get(charset, charset)


def read_document(path: Union[str, Path]) -> str:
    """
    Read and decode the reference document.

    Args:
        path: Saved HTML page

    Returns:
        Document text with '\\n' line endings

    Raises:
        DocumentSourceError: the file is missing or unreadable
    """
    path = Path(path)
    try:
        raw_bytes = path.read_bytes()
    except OSError as e:
        raise DocumentSourceError(
            message=f"Cannot read document {path}: {e.strerror or e}",
            path=str(path),
        ) from e

    charset = detect_charset_from_bytes(raw_bytes)
    try:
        text = raw_bytes.decode(charset, errors='replace')
    except LookupError:
        logger.warning(f"Unknown charset {charset!r} declared in {path.name}, decoding as utf-8")
        text = raw_bytes.decode('utf-8', errors='replace')

    logger.info(f"Read {len(raw_bytes)} bytes from {path} ({charset})")
    return text.replace('\r\n', '\n').replace('\r', '\n')
