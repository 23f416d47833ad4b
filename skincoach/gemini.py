# created: 10/16/2026
# last updated: 10/16/2026
# lazy gemini handle and the single-attempt generate call

import logging
from typing import Any, List, Optional

import google.generativeai as genai

from skincoach.config import get_gemini_api_key, get_gemini_model_name, get_gemini_timeout
from skincoach.errors import UpstreamEmptyError
from skincoach.normalize import EncodedImage, decode_payload

logger = logging.getLogger(__name__)

#-----------------------------------------------------------------
# Configure Gemini (on first use, never at import time)
#-----------------------------------------------------------------
_model: Optional[genai.GenerativeModel] = None


def get_gemini_model() -> genai.GenerativeModel:
    global _model
    if _model is not None:
        return _model

    # raises ConfigurationError when the key is missing
    api_key = get_gemini_api_key()
    genai.configure(api_key=api_key)

    model = genai.GenerativeModel(get_gemini_model_name())
    logger.info("Gemini model %s initialized", model.model_name)

    # publish only the fully built handle; concurrent cold starts may build twice
    _model = model
    return _model


def reset_gemini_model() -> None:
    global _model
    _model = None


#-----------------------------------------------------------------
# calling the model
#-----------------------------------------------------------------
def build_content_parts(text: str, image: Optional[EncodedImage] = None) -> List[Any]:
    parts: List[Any] = [text]
    if image is not None:
        parts.append({"mime_type": image.mime_type, "data": decode_payload(image)})
    return parts


def _response_text(response: Any) -> str:
    try:
        return response.text or ""
    except ValueError:
        # blocked or empty candidates have no text accessor
        logger.warning("Gemini returned no text parts: %s", getattr(response, "prompt_feedback", None))
        return ""


def generate_text(parts: List[Any]) -> str:
    model = get_gemini_model()
    response = model.generate_content(
        parts,
        request_options={"timeout": get_gemini_timeout()},
    )

    text = _response_text(response).strip()
    if not text:
        raise UpstreamEmptyError()
    return text
