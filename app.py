from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from utils.db import init_db_connection
from utils.errors import register_error_handlers
from utils.logging_config import setup_logging

# Import controllers
from controllers.attendance_controller import attendance_bp


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)                   # Initialize Flask app
    app.config.from_object(config_object)   # Load configuration from Config class
    app.config.update(overrides)
    app.json.sort_keys = False              # keep field order of records as stored

    setup_logging(app.config["LOG_LEVEL"])
    CORS(app, origins=app.config["CORS_ORIGINS"])
    init_db_connection(app)                 # Initialize MongoDB connection

    # Register Blueprint
    app.register_blueprint(attendance_bp)
    register_error_handlers(app)

    # Liveness check
    @app.route("/")
    def home():
        return jsonify({
            "message": "Attendance API is running",
            "status": "active",
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        })

    return app


app = create_app()


# Run the app
if __name__ == "__main__":
    app.logger.info("Server is running on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
