"""
Byte-to-text encoding recovery.

Rules:
- Decode as UTF-8 first (the common case).
- If UTF-8 fails, or the decoded text carries a replacement character,
  decode the same bytes with the Shift_JIS-family fallback instead.
- If the fallback fails too, raise DecodeError naming both encodings.
"""

from __future__ import annotations

from typing import Optional

from charset_normalizer import from_bytes

from .errors import DecodeError
from .logging_config import get_logger
from .rules import FALLBACK_ENCODING, PRIMARY_ENCODING, REPLACEMENT_CHAR

logger = get_logger(__name__)


def _closest_encoding(raw: bytes) -> Optional[str]:
    match = from_bytes(raw).best()
    return match.encoding if match is not None else None


def decode_bytes(raw: bytes, fallback_encoding: str = FALLBACK_ENCODING) -> str:
    """
    Decode raw file bytes into text.

    A strictly valid UTF-8 document that happens to contain a literal
    U+FFFD still triggers the fallback; when that fallback cannot decode
    the bytes, the UTF-8 text is returned rather than raising.
    """
    utf8_text: Optional[str] = None
    try:
        utf8_text = raw.decode(PRIMARY_ENCODING)
    except UnicodeDecodeError:
        pass
    else:
        if REPLACEMENT_CHAR not in utf8_text:
            return utf8_text

    try:
        text = raw.decode(fallback_encoding)
    except UnicodeDecodeError:
        if utf8_text is not None:
            return utf8_text
        raise DecodeError(
            (PRIMARY_ENCODING, fallback_encoding), guess=_closest_encoding(raw)
        )

    logger.debug("decoded_with_fallback", encoding=fallback_encoding)
    return text
