"""
Helpers for audio parts of chat messages.

Archived messages reference audio by server-relative file path; transient
test-run results carry the audio inline as base64.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Optional

from storytime.utils.slug import to_slug

DEFAULT_AUDIO_MIME_TYPE = "audio/mp3"

_BASE64_BODY = re.compile(r"^[A-Za-z0-9+/]+=*$")
_DATA_URL = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[^;,]*)*),(?P<body>.*)$",
    re.DOTALL,
)
_MIN_RAW_BASE64_LENGTH = 100


@dataclass(frozen=True)
class AudioPart:
    """One playable audio part: a URL to fetch, or inline bytes."""

    url: Optional[str] = None
    data: Optional[bytes] = None
    mime_type: Optional[str] = None


def is_base64_audio(value: str) -> bool:
    """True for inline base64 audio, False for a file path reference."""
    if value.startswith("data:audio/"):
        return True
    return len(value) > _MIN_RAW_BASE64_LENGTH and bool(_BASE64_BODY.match(value))


def decode_audio(
    value: str, fallback_mime_type: str = DEFAULT_AUDIO_MIME_TYPE
) -> tuple[Optional[bytes], str]:
    """Decode inline audio into raw bytes.

    Accepts ``data:<mime>[;param...];base64,<body>`` URLs and bare base64.
    Returns ``(None, mime_type)`` when the value cannot be decoded.
    """
    payload = (value or "").strip()
    mime_type = fallback_mime_type

    match = _DATA_URL.match(payload)
    if match:
        mime_type = (match.group("mime") or fallback_mime_type).lower()
        params = {param.strip().lower() for param in match.group("params").split(";")}
        if "base64" not in params:
            return None, mime_type
        payload = match.group("body")
    elif payload.startswith("data:"):
        return None, mime_type

    if not payload:
        return None, mime_type
    try:
        return base64.b64decode(payload, validate=True), mime_type
    except binascii.Error:
        return None, mime_type


def audio_url(value: str, base_url: str, character: str) -> Optional[str]:
    """Absolute URL for an archived audio file, None for inline audio."""
    if is_base64_audio(value):
        return None
    if value.startswith("/"):
        return f"{base_url.rstrip('/')}{value}"
    return f"{base_url.rstrip('/')}/audio/{to_slug(character)}/{value}"


def resolve_audio(value: str, base_url: str, character: str) -> Optional[AudioPart]:
    """Turn one audio entry of a message into something playable.

    Archived entries become URLs under ``base_url``; inline entries are
    decoded. Returns None for inline audio that does not decode.
    """
    url = audio_url(value, base_url, character)
    if url is not None:
        return AudioPart(url=url)

    data, mime_type = decode_audio(value)
    if data is None:
        return None
    return AudioPart(data=data, mime_type=mime_type)
