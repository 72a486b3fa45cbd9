"""
utils/validation_utils.py

Purpose: Input parsing and sanitization

- Bearer header parsing
- Upload filename sanitization
"""

import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import Optional


def parse_bearer_token(header: Optional[str]) -> Optional[str]:
    """
    Extracts the token from an "Authorization: Bearer <token>" header.

    The header must split on single spaces into exactly two parts and the
    first part must be the Bearer scheme.

    Returns:
        The token, or None if the header is missing or malformed
    """
    if not header:
        return None

    parts = header.split(" ")
    if len(parts) != 2:
        return None

    scheme, token = parts
    if scheme.lower() != "bearer" or not token:
        return None

    return token


def sanitize_filename(filename: str) -> str:
    """
    Reduces a client-supplied filename to its basename and replaces runs of
    whitespace with underscores.

    Example:
        "C:\\docs\\my offer.pdf" -> "my_offer.pdf"
    """
    name = PureWindowsPath(PurePosixPath(filename).name).name
    name = re.sub(r"\s+", "_", name)
    if name in ("", ".", ".."):
        return "upload"
    return name
