# created: 10/16/2026
# last updated: 10/16/2026
# error types shared by the validator, the gemini adapter and the routes

from typing import Any, Dict


class SkinCoachError(Exception):
    """Base error. ``status_code`` is the HTTP status the routes answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(SkinCoachError):
    # caller-caused: 400, 405, 413, 415
    status_code = 400


class ConfigurationError(SkinCoachError):
    status_code = 500


class UpstreamEmptyError(SkinCoachError):
    status_code = 502

    def __init__(self, message: str = "Empty response from AI model."):
        super().__init__(message)


class UpstreamFormatError(SkinCoachError):
    status_code = 502

    def __init__(self, message: str = "Invalid AI response format."):
        super().__init__(message)


#-----------------------------------------------------------------
# mapping any exception onto the {ok: false, error} envelope
#-----------------------------------------------------------------
def status_for(exc: BaseException) -> int:
    status = getattr(exc, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool) and 400 <= status <= 599:
        return status
    return 500


def message_for(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or exc.__class__.__name__


def safe_error(exc: BaseException) -> Dict[str, Any]:
    return {
        "message": message_for(exc),
        "code": getattr(exc, "code", None),
        "statusCode": getattr(exc, "status_code", None),
    }


def error_body(message: str) -> Dict[str, Any]:
    return {"ok": False, "error": message}
