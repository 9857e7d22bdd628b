import logging
import uuid

from flask import Flask, request, jsonify
from flask_cors import CORS

from atlas_config import (
    ALLOWED_ORIGINS,
    ATLAS_LOCALE,
    GEMINI_API_KEY,
    LOG_LEVEL,
    MAP_CENTER,
    MAP_ZOOM,
    MAX_ASSISTANT_SESSIONS,
    PROJECT_KNOWLEDGE,
    TILE_ATTRIBUTION,
    TILE_URL,
)
from geography import (
    Category,
    DEFAULT_ACTIVE_CATEGORIES,
    INTRO_TIPS,
    legend,
    load_nepal_dataset,
    resolve_locale,
    text,
    to_category,
)
from map_engine import (
    compose_map_overlays,
    compute_candidates,
    list_summary,
    markers_only,
    project_list_items,
    province_label,
)
from assistant import AssistantSession, build_default_provider

log = logging.getLogger('werkzeug')
log.setLevel(logging.ERROR)

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

# --- Flask App Initialization ---
app = Flask(__name__)

CORS(app, resources={r"/*": {
    "origins": ALLOWED_ORIGINS,
    "methods": ["GET", "POST", "DELETE", "OPTIONS"],
    "allow_headers": ["Content-Type", "Authorization", "Accept"]
}})

# --- Static dataset (read-only for the life of the process) ---
DATASET = load_nepal_dataset()
logger.info(f"Loaded {DATASET!r} with {DATASET.total_features()} features")

# --- Assistant ---
assistant_provider = build_default_provider(GEMINI_API_KEY)

# In-memory only, capped at MAX_ASSISTANT_SESSIONS: sessions vanish on restart
ASSISTANT_SESSIONS = {}


async def ask_remote(question):
    # Looked up per call so the provider can be swapped (tests, key rotation).
    return await assistant_provider.ask(question)


class FilterArgumentError(ValueError):
    pass


def _request_locale():
    return resolve_locale(request.args.get("locale") or ATLAS_LOCALE)


def _parse_filter_args():
    """
    Reads the filter inputs from the query string.
    categories absent -> default toggles; present but empty -> nothing active.
    """
    raw = request.args.get("categories")
    if raw is None:
        active = set(DEFAULT_ACTIVE_CATEGORIES)
    else:
        active = set()
        for key in raw.split(","):
            key = key.strip()
            if not key:
                continue
            try:
                active.add(to_category(key))
            except ValueError:
                raise FilterArgumentError(key)
    province = request.args.get("province") or None
    query = request.args.get("q", "")
    return active, province, query


def _filter_echo(active, province, query):
    return {
        "categories": sorted(c.value for c in active),
        "province": province,
        "q": query,
    }


@app.errorhandler(FilterArgumentError)
def handle_unknown_category(e):
    return jsonify({"error": f"Unknown category: {e}"}), 400


# --- 1. Health Check Route ---
@app.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "healthy"}), 200


@app.route('/api/categories', methods=['GET'])
def get_categories():
    locale = _request_locale()
    return jsonify({
        "categories": [d.to_dict() for d in legend(locale)],
        "default_active": [c.value for c in Category if c in DEFAULT_ACTIVE_CATEGORIES],
    })


@app.route('/api/provinces', methods=['GET'])
def get_provinces():
    locale = _request_locale()
    return jsonify({
        "all_label": text("all_provinces", locale),
        "provinces": [
            {"name": p.name, "capital": p.capital.to_dict(), "feature_count": p.feature_count()}
            for p in DATASET.provinces
        ],
    })


@app.route('/api/map-config', methods=['GET'])
def get_map_config():
    return jsonify({
        "center": MAP_CENTER,
        "zoom": MAP_ZOOM,
        "tile_url": TILE_URL,
        "attribution": TILE_ATTRIBUTION,
        "project": {"name": PROJECT_KNOWLEDGE["project_name"], "version": PROJECT_KNOWLEDGE["version"]},
    })


@app.route('/api/intro', methods=['GET'])
def get_intro():
    return jsonify({"description": PROJECT_KNOWLEDGE["description"], "tips": INTRO_TIPS})


@app.route('/api/candidates', methods=['GET'])
def get_candidates():
    active, province, query = _parse_filter_args()
    candidates = compute_candidates(DATASET, active, province, query)
    return jsonify({
        "filters": _filter_echo(active, province, query),
        "count": len(candidates),
        "candidates": [c.to_dict() for c in candidates],
    })


@app.route('/api/overlays', methods=['GET'])
def get_overlays():
    active, province, query = _parse_filter_args()
    locale = _request_locale()
    candidates = compute_candidates(DATASET, active, province, query)
    overlays = compose_map_overlays(candidates, DATASET.highways, active, locale)
    return jsonify({
        "filters": _filter_echo(active, province, query),
        "marker_count": len(markers_only(overlays)),
        "overlays": [o.to_dict() for o in overlays],
        "labels": {"province": province_label(locale)},
    })


@app.route('/api/list', methods=['GET'])
def get_list():
    active, province, query = _parse_filter_args()
    locale = _request_locale()
    candidates = compute_candidates(DATASET, active, province, query)
    entries = project_list_items(candidates, locale)
    return jsonify({
        "filters": _filter_echo(active, province, query),
        "count": len(entries),
        "summary": list_summary(entries, locale),
        "entries": [e.to_dict() for e in entries],
    })


# --- Assistant Routes ---
def _get_session_or_404(session_id):
    session = ASSISTANT_SESSIONS.get(session_id)
    if session is None:
        return None, (jsonify({"error": "Unknown assistant session"}), 404)
    return session, None


def _json_object_body():
    """Returns (data, None) for an absent or object body, (None, error response) otherwise."""
    data = request.get_json(silent=True)
    if data is None:
        return {}, None
    if not isinstance(data, dict):
        return None, (jsonify({"error": "JSON object body required"}), 400)
    return data, None


def _evict_oldest_sessions():
    # dicts keep insertion order, so the first key is the oldest session
    while ASSISTANT_SESSIONS and len(ASSISTANT_SESSIONS) >= MAX_ASSISTANT_SESSIONS:
        oldest_id = next(iter(ASSISTANT_SESSIONS))
        ASSISTANT_SESSIONS.pop(oldest_id).reset()
        logger.info(f"Assistant session {oldest_id} evicted")


@app.route('/api/assistant/sessions', methods=['POST'])
def create_assistant_session():
    data, error = _json_object_body()
    if error:
        return error
    _evict_oldest_sessions()
    session_id = uuid.uuid4().hex
    session = AssistantSession(ask_remote, locale=data.get("locale") or ATLAS_LOCALE)
    ASSISTANT_SESSIONS[session_id] = session
    logger.info(f"Assistant session {session_id} created")
    return jsonify({"session_id": session_id, **session.snapshot()}), 201


@app.route('/api/assistant/sessions/<session_id>', methods=['GET'])
def get_assistant_session(session_id):
    session, error = _get_session_or_404(session_id)
    if error:
        return error
    return jsonify({"session_id": session_id, **session.snapshot()})


@app.route('/api/assistant/sessions/<session_id>/messages', methods=['POST'])
async def post_assistant_message(session_id):
    session, error = _get_session_or_404(session_id)
    if error:
        return error

    data, error = _json_object_body()
    if error:
        return error
    user_text = data.get("text", "")
    if not isinstance(user_text, str):
        return jsonify({"error": "'text' must be a string"}), 400

    try:
        accepted = await session.submit(user_text)
    except Exception as e:
        logger.error(f"Assistant message error: {e}")
        return jsonify({"error": "Internal server error"}), 500

    # submit() decides under the session lock; a refusal while a reply is pending is a conflict
    if not accepted and session.is_typing:
        return jsonify({"error": "A reply is already pending", "session_id": session_id, **session.snapshot()}), 409

    return jsonify({"accepted": accepted, "session_id": session_id, **session.snapshot()})


@app.route('/api/assistant/sessions/<session_id>/reset', methods=['POST'])
def reset_assistant_session(session_id):
    session, error = _get_session_or_404(session_id)
    if error:
        return error
    session.reset()
    logger.info(f"Assistant session {session_id} reset")
    return jsonify({"session_id": session_id, **session.snapshot()})


@app.route('/api/assistant/sessions/<session_id>', methods=['DELETE'])
def delete_assistant_session(session_id):
    session = ASSISTANT_SESSIONS.pop(session_id, None)
    if session is None:
        return jsonify({"error": "Unknown assistant session"}), 404
    # drops any reply still in flight for this session
    session.reset()
    logger.info(f"Assistant session {session_id} deleted")
    return jsonify({"session_id": session_id, "deleted": True})


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
