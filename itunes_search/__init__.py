from flask import Flask, jsonify, request, g
import atexit
import time
import logging
from flask_cors import CORS

from .src.config import Config
from .src.services.search_result_controller import SearchResultController
from .src.transport import NetworkSession, RequestsNetworkSession
from .routes.health import bp as health_bp
from .routes.search import bp as search_bp


def create_app(session: NetworkSession | None = None, base_url: str | None = None):
    app = Flask(__name__)
    app.config.from_object(Config)

    origins = Config.CORS_ORIGINS
    CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)

    if session is None:
        # La app es dueña del transporte por defecto: se cierra al salir
        session = RequestsNetworkSession()
        atexit.register(session.close)

    # Un controlador y un transporte por aplicación; cada búsqueda es independiente
    app.extensions["itunes_search"] = {
        "controller": SearchResultController(base_url=base_url),
        "session": session,
    }

    app.register_blueprint(health_bp)
    app.register_blueprint(search_bp)

    # Logging simple de todas las peticiones entrantes
    logging.basicConfig(level=logging.DEBUG if getattr(Config, 'DEBUG', True) else logging.INFO)

    @app.before_request
    def _log_start():
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, '_start_time', None)
        dur_ms = int((time.time() - started) * 1000) if started else -1
        logging.info(
            "%s %s -> %s (%d ms) ip=%s",
            request.method,
            request.path,
            resp.status_code,
            dur_ms,
            request.headers.get('X-Forwarded-For', request.remote_addr),
        )
        return resp

    @app.get("/")
    def root():
        return jsonify({"name": "itunes_search", "status": "ok"}), 200

    return app
