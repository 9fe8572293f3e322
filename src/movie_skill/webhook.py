"""
Flask webhook for the voice platform.

Translates Alexa-style request envelopes into dialogue turns and turns the
result back into a response envelope. Session state travels in the
envelope's session attributes, so the server itself keeps none.
"""
import logging
from typing import Any, Dict, Optional
from flask import Flask, jsonify, request

from .app import MovieSkillApp
from .memory import SessionState
from .models import SkillResponse

logger = logging.getLogger(__name__)

LAUNCH_PROMPT = "What would you like to do with your movies?"
GENERIC_ERROR = "Sorry, something went wrong talking to your movie server"


def extract_slots(intent: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Flatten platform slots ({"movie": {"name": "movie", "value": "..."}}) to name -> value.
    """
    slots = intent.get("slots") or {}
    return {name: (slot or {}).get("value") for name, slot in slots.items()}


def build_envelope(response: SkillResponse, state: SessionState) -> Dict[str, Any]:
    """Build the platform response envelope for a turn."""
    envelope: Dict[str, Any] = {
        "version": "1.0",
        # A finished dialogue carries no state into the next session
        "sessionAttributes": {} if response.end_session else state.to_attributes(),
        "response": {"shouldEndSession": response.end_session},
    }
    if response.speech:
        envelope["response"]["outputSpeech"] = {"type": "PlainText", "text": response.speech}
    return envelope


def create_app(skill: MovieSkillApp) -> Flask:
    """
    Create the Flask application serving the skill.

    :param skill: Initialized MovieSkillApp
    :return: Flask app with /skill and /health routes
    """
    app = Flask(__name__)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/skill", methods=["POST"])
    def skill_endpoint():
        body = request.get_json(silent=True)
        if not body or "request" not in body:
            return jsonify({"error": "Missing 'request' in request body"}), 400

        platform_request = body["request"]
        request_type = platform_request.get("type")
        session = body.get("session") or {}
        session_id = session.get("sessionId", "unknown")

        if request_type == "LaunchRequest":
            logger.info(f"Launch - Session: {session_id}")
            return jsonify(build_envelope(SkillResponse.ask(LAUNCH_PROMPT), SessionState.idle()))

        if request_type == "SessionEndedRequest":
            logger.info(f"Session ended - Session: {session_id}, Reason: {platform_request.get('reason')}")
            return jsonify(build_envelope(SkillResponse.tell(""), SessionState.idle()))

        if request_type != "IntentRequest":
            return jsonify({"error": f"Unsupported request type: {request_type}"}), 400

        intent = platform_request.get("intent") or {}
        try:
            state = SessionState.from_attributes(session.get("attributes"))
            result = skill.handle(intent.get("name"), extract_slots(intent), state)
        except Exception as e:
            logger.error(f"Turn failed - Session: {session_id}, Intent: {intent.get('name')}: {e}",
                         exc_info=True)
            return jsonify(build_envelope(SkillResponse.tell(GENERIC_ERROR), SessionState.idle()))

        logger.info(
            f"Turn complete - Session: {session_id}, End: {result.response.end_session}, "
            f"Continuation: {result.state.continuation}"
        )
        return jsonify(build_envelope(result.response, result.state))

    return app
