# created: 10/16/2026
# last updated: 10/16/2026
# http functions: health check, structured skin analysis, free-text photo analysis

import logging
from datetime import datetime, timezone

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from skincoach import gemini
from skincoach.config import get_allowed_origins, get_log_level, get_service_name
from skincoach.errors import error_body, message_for, safe_error, status_for
from skincoach.normalize import normalize_base64, parse_analysis_json, photo_analysis_body
from skincoach.prompts import build_photo_prompt, build_skin_analysis_prompts, combine_prompts
from skincoach.validation import assert_post_json, read_json_body, require_image_base64, require_profile

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = Flask(__name__)

CORS(
    app,
    origins=get_allowed_origins(),
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    supports_credentials=True,
)


def _failure(exc: Exception, where: str):
    logger.error("%s error: %s", where, safe_error(exc))
    return jsonify(error_body(message_for(exc))), status_for(exc)


#-----------------------------------------------------------------
# request plumbing
#-----------------------------------------------------------------
@app.before_request
def answer_preflight():
    # flask-cors still decorates this response with the allow headers
    if request.method == "OPTIONS":
        return "", 204


@app.after_request
def log_response(response):
    logger.info("%s %s -> %s", request.method, request.path, response.status_code)
    return response


@app.errorhandler(HTTPException)
def http_error(e: HTTPException):
    message = e.description or e.name
    if isinstance(e, MethodNotAllowed) and e.valid_methods:
        allowed = [m for m in e.valid_methods if m not in ("HEAD", "OPTIONS")]
        message = f"Method not allowed. Use {', '.join(sorted(allowed))}."
    return jsonify(error_body(message)), e.code


#-----------------------------------------------------------------
# health
#-----------------------------------------------------------------
@app.get("/health")
def health():
    return jsonify({
        "ok": True,
        "service": get_service_name(),
        "time": datetime.now(timezone.utc).isoformat(),
    }), 200


#-----------------------------------------------------------------
# skinAnalysis: POST {profile, language?, photoData?} -> json plan
#-----------------------------------------------------------------
# GET reaches the handlers so the POST check answers with the json envelope
@app.route("/skinAnalysis", methods=["GET", "POST"])
def skin_analysis():
    try:
        assert_post_json(request)

        body = read_json_body(request)
        profile = require_profile(body)
        language = body.get("language") or "en"

        # older clients send the photo inside the profile
        photo_data = body.get("photoData")
        if photo_data is None and isinstance(profile, dict):
            photo_data = profile.get("photoData")

        prompts = build_skin_analysis_prompts(profile, language, has_photo=photo_data)

        image = None
        if photo_data and isinstance(photo_data, str):
            image = normalize_base64(photo_data)

        raw = gemini.generate_text(gemini.build_content_parts(combine_prompts(prompts), image))
        analysis = parse_analysis_json(raw)

        return jsonify(analysis), 200
    except Exception as e:
        return _failure(e, "skinAnalysis")


#-----------------------------------------------------------------
# analyzePhoto: POST {imageBase64, prompt?, lang?} -> {ok, analysisText}
#-----------------------------------------------------------------
@app.route("/analyzePhoto", methods=["GET", "POST"])
def analyze_photo():
    try:
        assert_post_json(request)

        body = read_json_body(request)
        image = normalize_base64(require_image_base64(body))
        prompt = build_photo_prompt(body.get("prompt"), body.get("lang"))

        text = gemini.generate_text(gemini.build_content_parts(prompt, image))

        return jsonify(photo_analysis_body(text)), 200
    except Exception as e:
        return _failure(e, "analyzePhoto")


if __name__ == "__main__":
    # Dev server on http://localhost:5000
    app.run(host="0.0.0.0", port=5000, debug=True)
