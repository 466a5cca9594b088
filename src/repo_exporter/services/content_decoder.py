"""Content decoder — turn a base64 contents payload into text.

GitHub wraps the base64 body at a fixed column width, so line breaks are
removed before decoding.  Decoding is strict in both stages: invalid base64
is ``MALFORMED`` and bytes that are not UTF-8 are ``NOT_TEXT``.
"""

from __future__ import annotations

import base64
import binascii

from repo_exporter.domain.exceptions import DecodeError, DecodeErrorKind

TRANSPORT_ENCODING = "base64"


def decode(raw: str) -> str:
    """Decode a base64 payload into a UTF-8 string."""
    compact = raw.replace("\n", "").replace("\r", "")
    try:
        data = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(DecodeErrorKind.MALFORMED, f"invalid base64: {exc}") from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(DecodeErrorKind.NOT_TEXT, "content is not UTF-8 text") from exc


def encode(text: str) -> str:
    """Inverse of :func:`decode` (unwrapped)."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
