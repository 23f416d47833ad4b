# created: 10/16/2026
# last updated: 10/16/2026
# request / response shapes used by the http client

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ProfileInput(BaseModel):
    """Skin profile as collected by the questionnaire. Every field is optional."""
    skinType: Optional[str] = Field(None, description="skin type, e.g. oily, dry, combination")
    concerns: Optional[Union[List[str], str]] = Field(None, description="skin concerns")
    ageRange: Optional[str] = Field(None, description="age bracket, e.g. 25-34")
    sunExposure: Optional[str] = Field(None, description="daily sun exposure")
    currentRoutine: Optional[str] = Field(None, description="free-text description of the current routine")
    photoData: Optional[str] = Field(None, description="data url or bare base64 image")


class SkinAnalysisRequest(BaseModel):
    profile: ProfileInput
    language: Literal["en", "fr"] = "en"
    photoData: Optional[str] = Field(None, description="photo sent next to the profile")


class AnalyzePhotoRequest(BaseModel):
    imageBase64: str = Field(..., description="data url or bare base64 image")
    prompt: Optional[str] = Field(None, description="replaces the built-in coach prompt")
    lang: Optional[Literal["en", "fr"]] = None


class AnalyzePhotoResponse(BaseModel):
    ok: bool
    analysisText: str = ""


class CheckInPhotos(BaseModel):
    front: Optional[str] = None
    left_profile: Optional[str] = None
    right_profile: Optional[str] = None

    def first_available(self) -> Optional[str]:
        # front is the primary photo; profiles are fallbacks
        return self.front or self.left_profile or self.right_profile


class DerivedFeatures(BaseModel):
    uneven_tone_score: Optional[float] = None
    texture_score: Optional[float] = None
    oiliness_score: Optional[float] = None
    barrier_comfort_score: Optional[float] = None
    detected_concerns: List[str] = Field(default_factory=list)
    ai_notes: str = ""


class CheckInAnalysis(BaseModel):
    overall_score: float
    summary: str
    derived_features: DerivedFeatures
