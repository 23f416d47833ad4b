# created: 10/16/2026
# last updated: 10/16/2026
# prompt templates for the structured plan and the free-text photo coach

from typing import Any, Mapping, NamedTuple, Optional


class PromptPair(NamedTuple):
    system: str
    user: str


#-----------------------------------------------------------------
# 1: structured skin analysis (json plan)
#-----------------------------------------------------------------
# keys stay in English for every language; only the example values are translated
SYSTEM_PROMPT_EN = """You are an expert dermatologist specializing in melanin-rich skin care. Analyze the provided skin profile and generate personalized skincare recommendations.

IMPORTANT: Respond ONLY with a valid JSON object, no additional text, no backticks, no "json" prefix. The format must be:

{
  "skinType": "the skin type",
  "concerns": ["list", "of", "concerns"],
  "overallScore": 85,
  "summary": "Personalized analysis summary",
  "recommendations": [
    {"title": "Title", "description": "Detailed description", "priority": "high|medium|low"}
  ],
  "morningRoutine": [
    {"step": 1, "product": "Product", "instructions": "Instructions", "timing": "Duration"}
  ],
  "eveningRoutine": [
    {"step": 1, "product": "Product", "instructions": "Instructions", "timing": "Duration"}
  ],
  "ingredients": [
    {"name": "Ingredient", "benefit": "Benefit", "safeForMelaninRich": true, "caution": "optional"}
  ]
}"""

SYSTEM_PROMPT_FR = """Tu es un dermatologue expert spécialisé dans les soins des peaux riches en mélanine. Analyse le profil de peau fourni et génère des recommandations personnalisées de soins.

IMPORTANT: Réponds UNIQUEMENT avec un objet JSON valide, sans texte supplémentaire, sans backticks, sans "json" au début. Le format doit être:

{
  "skinType": "le type de peau",
  "concerns": ["liste", "des", "préoccupations"],
  "overallScore": 85,
  "summary": "Résumé personnalisé de l'analyse",
  "recommendations": [
    {"title": "Titre", "description": "Description détaillée", "priority": "high|medium|low"}
  ],
  "morningRoutine": [
    {"step": 1, "product": "Produit", "instructions": "Instructions", "timing": "Durée"}
  ],
  "eveningRoutine": [
    {"step": 1, "product": "Produit", "instructions": "Instructions", "timing": "Durée"}
  ],
  "ingredients": [
    {"name": "Ingrédient", "benefit": "Bénéfice", "safeForMelaninRich": true, "caution": "optionnel"}
  ]
}"""

USER_PROMPT_EN = """Analyze this skin profile and generate personalized recommendations:

Skin Type: {skin_type}
Concerns: {concerns}
Age Range: {age_range}
Sun Exposure: {sun_exposure}
Current Routine: {current_routine}
{photo_line}

Generate a complete analysis with:
- A skin health score (0-100)
- A personalized summary
- 3-4 priority recommendations
- A morning routine (4-5 steps)
- An evening routine (4-5 steps)
- 5-6 recommended ingredients (with cautions for melanin-rich skin)"""

USER_PROMPT_FR = """Analyse ce profil de peau et génère des recommandations personnalisées:

Type de peau: {skin_type}
Préoccupations: {concerns}
Tranche d'âge: {age_range}
Exposition au soleil: {sun_exposure}
Routine actuelle: {current_routine}
{photo_line}

Génère une analyse complète avec:
- Un score de santé de la peau (0-100)
- Un résumé personnalisé
- 3-4 recommandations prioritaires
- Une routine matin (4-5 étapes)
- Une routine soir (4-5 étapes)
- 5-6 ingrédients recommandés (avec précautions pour peaux riches en mélanine)"""

# per-language wording for absent fields and the photo notice
LABELS = {
    "en": {
        "not_specified": "Not specified",
        "no_concerns": "None",
        "photo_line": "Skin photo provided for visual analysis.",
    },
    "fr": {
        "not_specified": "Non spécifié",
        "no_concerns": "Aucune",
        "photo_line": "Photo de peau fournie pour analyse visuelle.",
    },
}


def _to_text(value: Any) -> str:
    """Render a JSON value the way the web client would show it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _present(value: Any) -> bool:
    # empty lists and objects still count as given
    if isinstance(value, (list, tuple, dict)):
        return True
    return bool(value)


def _field(profile: Mapping[str, Any], key: str, placeholder: str) -> str:
    value = profile.get(key)
    return _to_text(value) if _present(value) else placeholder


def _concerns(profile: Mapping[str, Any], placeholder: str) -> str:
    concerns = profile.get("concerns")
    if isinstance(concerns, (list, tuple)):
        return ", ".join(_to_text(c) for c in concerns) if concerns else placeholder
    return _to_text(concerns) if _present(concerns) else placeholder


def build_skin_analysis_prompts(profile: Any, language: Optional[str], has_photo: Any) -> PromptPair:
    """
    Render the system and user prompts for the structured plan.

    Only "fr" selects French; every other value (missing, "FR", "es", ...)
    falls through to English.
    """
    is_fr = language == "fr"
    labels = LABELS["fr" if is_fr else "en"]
    if not isinstance(profile, Mapping):
        profile = {}

    not_specified = labels["not_specified"]
    template = USER_PROMPT_FR if is_fr else USER_PROMPT_EN
    user = template.format(
        skin_type=_field(profile, "skinType", not_specified),
        concerns=_concerns(profile, labels["no_concerns"]),
        age_range=_field(profile, "ageRange", not_specified),
        sun_exposure=_field(profile, "sunExposure", not_specified),
        current_routine=_field(profile, "currentRoutine", not_specified),
        photo_line=labels["photo_line"] if has_photo else "",
    )

    return PromptPair(system=SYSTEM_PROMPT_FR if is_fr else SYSTEM_PROMPT_EN, user=user)


def combine_prompts(pair: PromptPair) -> str:
    return f"{pair.system}\n\n{pair.user}"


#-----------------------------------------------------------------
# 2: free-text photo coach
#-----------------------------------------------------------------
PHOTO_COACH_PROMPT = """You are a premium cosmetic beauty coach specialized in melanin-rich skin.
Analyze the selfie for cosmetic insights only (NOT medical diagnosis). Be specific and actionable.
Return concise, structured recommendations (cleanser/treatment/moisturizer/SPF + 1-2 weekly actions) and include safety cautions for irritation/PIH risk.
Write in {language}."""


def build_photo_prompt(prompt: Any = None, lang: Optional[str] = None) -> str:
    # a caller-supplied prompt replaces the template entirely
    if isinstance(prompt, str) and prompt.strip():
        return prompt.strip()

    language = "French" if lang == "fr" else "English"
    return PHOTO_COACH_PROMPT.format(language=language)
