import atexit
import logging
import sqlite3

from flask import Flask, jsonify, request

from chat.engine import ChatEngine
from session.errors import ContextValidationError
from settings import load_settings


logger = logging.getLogger(__name__)


# -------------------------------------------------
# Setup
# -------------------------------------------------

def create_app(engine=None, settings=None):
    settings = settings or load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    if engine is None:
        engine = ChatEngine.from_settings(settings)
        engine.start()
        atexit.register(engine.shutdown)

    app = Flask(__name__)
    app.secret_key = settings.flask_secret_key
    app.extensions["chat_engine"] = engine

    register_routes(app, engine)
    return app


# -------------------------------------------------
# Routes
# -------------------------------------------------

def register_routes(app, engine):

    @app.errorhandler(sqlite3.Error)
    def storage_error(e):
        logger.exception("Context storage failed")
        return jsonify({"error": f"Context storage failed: {e}"}), 500

    @app.route("/api/state", methods=["GET"])
    def get_state():
        return jsonify(engine.view())

    @app.route("/api/chat", methods=["POST"])
    def chat():
        message = (request.get_json(silent=True) or {}).get("message", "")
        reply = engine.submit(message)

        view = engine.view()
        view["reply"] = reply.to_dict() if reply else None
        return jsonify(view)

    @app.route("/api/admin/login", methods=["POST"])
    def admin_login():
        email = (request.get_json(silent=True) or {}).get("email", "")
        if not engine.login(email):
            return jsonify({"error": engine.gate.error}), 401
        return jsonify(engine.view())

    @app.route("/api/admin/logout", methods=["POST"])
    def admin_logout():
        engine.logout()
        return jsonify(engine.view())

    @app.route("/api/context", methods=["POST"])
    def upload_context():
        data = request.get_json(silent=True) or {}
        try:
            engine.apply_context(data.get("content", ""), data.get("names") or [])
        except ContextValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(engine.view())

    @app.route("/api/context", methods=["DELETE"])
    def clear_context():
        engine.clear_context()
        return jsonify(engine.view())

    @app.route("/api/session/retry", methods=["POST"])
    def retry_session():
        engine.retry_session()
        return jsonify(engine.view())


if __name__ == "__main__":
    create_app().run(debug=True)
