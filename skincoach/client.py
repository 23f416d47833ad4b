# created: 10/16/2026
# last updated: 10/16/2026
# http client for the skincoach functions; single place for every AI call

import logging
from typing import Any, Dict, Mapping, Optional, Union

import pydantic
import requests

from skincoach.config import get_functions_base_url
from skincoach.models import (
    AnalyzePhotoRequest,
    AnalyzePhotoResponse,
    CheckInAnalysis,
    CheckInPhotos,
    DerivedFeatures,
    ProfileInput,
    SkinAnalysisRequest,
)

logger = logging.getLogger(__name__)

AI_TIMEOUT_SECONDS = 60
HEALTH_TIMEOUT_SECONDS = 10


class SkinCoachClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidResponseError(SkinCoachClientError):
    pass


def _detected_concerns(value: Any) -> list:
    if isinstance(value, list):
        return [str(c) for c in value]
    if isinstance(value, str) and value:
        return [value]
    return []


class SkinCoachClient:
    """
    Thin wrapper over the three http functions.

    Every non-2xx answer and every transport failure is raised as a
    SkinCoachClientError; callers catch instead of inspecting return values.
    """

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None,
                 timeout: float = AI_TIMEOUT_SECONDS):
        self.base_url = (base_url or get_functions_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _post_json(self, path: str, payload: Dict[str, Any], failure_message: str) -> Any:
        url = self._url(path)
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("[AI] %s transport error: %s", path, e)
            raise SkinCoachClientError("Network error calling AI service") from e

        logger.info("[AI] %s response status: %s", path, response.status_code)

        if not response.ok:
            try:
                error_data = response.json()
                logger.error("[AI] %s error response: %s", path, error_data)
                message = (error_data.get("error") if isinstance(error_data, dict) else None) or failure_message
            except ValueError:
                message = f"{failure_message} ({response.status_code} {response.reason})"
            raise SkinCoachClientError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError("Invalid response format from AI service",
                                       status_code=response.status_code) from e

    #-----------------------------------------------------------------
    # structured plan
    #-----------------------------------------------------------------
    def generate_skin_analysis(self, request: Union[SkinAnalysisRequest, Mapping[str, Any]]) -> Dict[str, Any]:
        if not isinstance(request, SkinAnalysisRequest):
            request = SkinAnalysisRequest.model_validate(request)

        logger.info("[AI] Calling skinAnalysis: %s", self._url("skinAnalysis"))
        data = self._post_json("skinAnalysis", request.model_dump(exclude_none=True),
                               "Failed to generate skin analysis")

        if not isinstance(data, dict):
            raise InvalidResponseError("Invalid response format from AI service")

        logger.info("[AI] skinAnalysis success, keys: %s", list(data.keys()))
        # returned as-is: the plan's shape is a contract with the model, not checked here
        return data

    #-----------------------------------------------------------------
    # free-text photo analysis
    #-----------------------------------------------------------------
    def analyze_photo(self, request: Union[AnalyzePhotoRequest, Mapping[str, Any]]) -> AnalyzePhotoResponse:
        if not isinstance(request, AnalyzePhotoRequest):
            request = AnalyzePhotoRequest.model_validate(request)

        logger.info("[AI] Calling analyzePhoto: %s imageBase64 length: %d",
                    self._url("analyzePhoto"), len(request.imageBase64))
        data = self._post_json("analyzePhoto", request.model_dump(exclude_none=True),
                               "Failed to analyze photo")

        if not isinstance(data, dict) or data.get("ok") is not True:
            error = data.get("error") if isinstance(data, dict) else None
            raise InvalidResponseError(error or "Invalid response from photo analysis")

        try:
            result = AnalyzePhotoResponse.model_validate(data)
        except pydantic.ValidationError as e:
            raise InvalidResponseError("Invalid response from photo analysis") from e

        logger.info("[AI] analyzePhoto success, analysisText length: %d", len(result.analysisText))
        return result

    #-----------------------------------------------------------------
    # check-in photos -> check-in summary
    #-----------------------------------------------------------------
    def analyze_check_in_photos(self, profile: Mapping[str, Any],
                                photos: Union[CheckInPhotos, Mapping[str, Any]],
                                language: str = "en") -> CheckInAnalysis:
        if not isinstance(photos, CheckInPhotos):
            photos = CheckInPhotos.model_validate(photos)

        photo = photos.first_available()
        if not photo:
            raise SkinCoachClientError("No photo available for analysis")

        logger.info("[AI] Calling skinAnalysis for check-in, photo length: %d", len(photo))
        data = self._post_json(
            "skinAnalysis",
            {"profile": dict(profile), "language": language, "photoData": photo},
            "Failed to analyze check-in photos",
        )
        if not isinstance(data, dict):
            raise InvalidResponseError("Invalid response format from AI service")

        overall_score = data.get("overallScore")
        summary = data.get("summary")
        concerns = data.get("concerns")

        try:
            return CheckInAnalysis(
                overall_score=75 if overall_score is None else overall_score,
                summary="Analysis complete." if summary is None else summary,
                derived_features=DerivedFeatures(
                    detected_concerns=_detected_concerns(concerns),
                    ai_notes="" if summary is None else summary,
                ),
            )
        except pydantic.ValidationError as e:
            raise InvalidResponseError("Invalid response format from AI service") from e

    #-----------------------------------------------------------------
    # health
    #-----------------------------------------------------------------
    def health_check(self) -> bool:
        url = self._url("health")
        logger.info("[AI] Health check: %s", url)
        try:
            response = self.session.get(url, timeout=HEALTH_TIMEOUT_SECONDS)
            if not response.ok:
                logger.error("[AI] Health check failed, status: %s", response.status_code)
                return False
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("[AI] Health check failed: %s", e)
            return False

        logger.info("[AI] Health check result: %s", data)
        return isinstance(data, dict) and data.get("ok") is True


def generate_skin_analysis_from_profile(profile: Mapping[str, Any], language: str = "en",
                                        client: Optional[SkinCoachClient] = None) -> Dict[str, Any]:
    """Map a stored user profile onto a skinAnalysis request."""
    client = client or SkinCoachClient()
    request = SkinAnalysisRequest(
        # the photo travels once, at the top level
        profile=ProfileInput.model_validate(
            {k: profile.get(k) for k in ProfileInput.model_fields if k != "photoData"}
        ),
        language=language if language == "fr" else "en",
        photoData=profile.get("photoData"),
    )
    return client.generate_skin_analysis(request)
