from flask import Blueprint, current_app, jsonify
from ..src.config import Config


bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    ext = current_app.extensions["itunes_search"]
    return jsonify({
        "status": "ok",
        "service": "itunes_search",
        "debug": Config.DEBUG,
        "search_url": ext["controller"].base_url,
        "transport": ext["session"].name,
    }), 200
