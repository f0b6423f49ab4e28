from flask import Flask, jsonify
from flask_cors import CORS

from authcheck.config import configure_logging
from authcheck.storage import UsageLogStore


def create_app(overrides=None):
    app = Flask(__name__)

    app.config.from_object("authcheck.config.Config")
    if overrides:
        app.config.update(overrides)
    configure_logging(app.config["LOG_LEVEL"])
    CORS(app)

    app.extensions["usage_log"] = UsageLogStore(app.config["DATABASE_URL"])

    from authcheck.api import api_bp
    app.register_blueprint(api_bp, url_prefix="/api/v1")

    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({"error": "Not found"}), 404

    return app
