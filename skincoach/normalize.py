# created: 10/16/2026
# last updated: 10/16/2026
# image payload normalization and cleanup of gemini text output

import base64
import binascii
import json
import logging
import re
from typing import Any, NamedTuple

from skincoach.config import DEFAULT_MIME_TYPE
from skincoach.errors import UpstreamFormatError, ValidationError

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r"^data:(.+?);base64,(.+)$", re.IGNORECASE | re.DOTALL)
URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


class EncodedImage(NamedTuple):
    mime_type: str
    base64: str


#-----------------------------------------------------------------
# images
#-----------------------------------------------------------------
def normalize_base64(value: str) -> EncodedImage:
    """
    Accepts either a data url ("data:image/png;base64,....") or a bare
    base64 string. Bare strings are assumed to be jpeg.
    """
    trimmed = value.strip()

    match = DATA_URL_RE.match(trimmed)
    if match:
        return EncodedImage(mime_type=match.group(1), base64=match.group(2))

    return EncodedImage(mime_type=DEFAULT_MIME_TYPE, base64=trimmed)


def decode_payload(image: EncodedImage) -> bytes:
    # the SDK wants raw bytes for inline data; accept url-safe and unpadded payloads
    payload = "".join(image.base64.split()).translate(URLSAFE_TO_STANDARD)
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error:
        raise ValidationError("Invalid image data (base64).")


#-----------------------------------------------------------------
# model output
#-----------------------------------------------------------------
def strip_code_fences(text: str) -> str:
    s = text.strip()

    # Remove leading ```json or ``` fence
    if s.startswith("```json"):
        s = s[len("```json"):]
    elif s.startswith("```"):
        s = s[len("```"):]

    # Remove trailing ```
    if s.endswith("```"):
        s = s[:-len("```")]

    return s.strip()


def _reject_constant(name: str):
    # NaN and Infinity are not JSON; browsers refuse them
    raise ValueError(f"non-JSON constant {name}")


def parse_analysis_json(raw_text: str) -> Any:
    try:
        return json.loads(strip_code_fences(raw_text), parse_constant=_reject_constant)
    except ValueError:
        logger.error("Failed to parse AI response: %r", raw_text)
        raise UpstreamFormatError()


def photo_analysis_body(text: str) -> dict:
    return {"ok": True, "analysisText": text.strip()}
