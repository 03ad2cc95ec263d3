"""Endpoint de búsqueda: sustituye a la vista de lista de la app original.

Recibe término + tipo de resultado, llama al controlador y devuelve las
filas ``title``/``artist``. Los fallos de red no se muestran al cliente (se
responde una lista vacía); los de decodificación además quedan en el log.
"""

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify, request

from ..src.config import Config
from ..src.errors import NetworkError, NetworkErrorKind
from ..src.models import ResultType, SearchResult


bp = Blueprint("search", __name__)
logger = logging.getLogger(__name__)


def _result_type_from_args() -> ResultType:
    segment = request.args.get("segment")
    if segment is not None:
        return ResultType.from_segment(int(segment))
    return ResultType.parse(request.args.get("entity") or ResultType.SOFTWARE.value)


def _row(result: SearchResult) -> Dict[str, Any]:
    return {"title": result.title, "artist": result.artist}


@bp.get("/search")
def search_route():
    """Búsqueda en iTunes.

    Query: term (requerido), entity (software|musicTrack|movie) o segment (0|1|2)
    Respuesta: { items: [ {title, artist}... ], returned: n, entity: str }
    """
    term = (request.args.get("term") or "").strip()
    if not term:
        return jsonify({"error": "term requerido"}), 400
    try:
        result_type = _result_type_from_args()
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    ext = current_app.extensions["itunes_search"]
    future = ext["controller"].perform_search(term, result_type, ext["session"])

    items: List[SearchResult] = []
    try:
        items = future.result(timeout=Config.SEARCH_WAIT_SECONDS)
    except FutureTimeoutError:
        return jsonify({"error": "iTunes no respondió a tiempo"}), 504
    except NetworkError as err:
        if err.kind is NetworkErrorKind.DECODING_ERROR:
            logger.error("Error decoding json: %s", err.cause)

    rows = [_row(r) for r in items]
    return jsonify({"items": rows, "returned": len(rows), "entity": result_type.value}), 200
