# created: 10/16/2026
# last updated: 10/16/2026
# request checks run before anything is sent to gemini

from typing import Any, Dict

from flask import Request

from skincoach.config import MAX_IMAGE_BASE64_CHARS
from skincoach.errors import ValidationError


def assert_post_json(req: Request) -> None:
    if req.method != "POST":
        raise ValidationError("Method not allowed. Use POST.", status_code=405)

    content_type = (req.headers.get("Content-Type") or "").lower()
    if "application/json" not in content_type:
        raise ValidationError("Unsupported content-type. Use application/json.", status_code=415)


def read_json_body(req: Request) -> Dict[str, Any]:
    body = req.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def require_profile(body: Dict[str, Any]) -> Any:
    profile = body.get("profile")
    # empty objects and lists are still a profile; None, false, 0 and "" are not
    if profile is None or (not profile and not isinstance(profile, (dict, list))):
        raise ValidationError("Missing profile data.")
    return profile


def require_image_base64(body: Dict[str, Any]) -> str:
    image_base64 = body.get("imageBase64")
    if not image_base64 or not isinstance(image_base64, str):
        raise ValidationError("Missing imageBase64 (string).")

    # base64 expands ~33%; this keeps the decoded image around 6MB
    if len(image_base64) > MAX_IMAGE_BASE64_CHARS:
        raise ValidationError("Image too large. Please upload a smaller image.", status_code=413)

    return image_base64
