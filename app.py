import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import Config
from utils.db import init_db_connection
from utils.json_provider import MongoJSONProvider

# Import controllers
from controllers.attendance_controller import attendance_bp


def create_app(config_object=Config, store=None, **overrides):
    """
    Build the Flask app.
    `store` lets callers (tests, scripts) hand in their own AttendanceStore
    instead of connecting through MONGO_URI.
    """
    app = Flask(__name__)
    app.json = MongoJSONProvider(app)

    app.config.from_object(config_object)   # Load configuration from Config class
    app.config.update(overrides)

    logging.basicConfig(level=app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    init_db_connection(app, store)          # Initialize MongoDB connection

    # Register Blueprint
    app.register_blueprint(attendance_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.name}), error.code

    @app.route("/")
    def root():
        return jsonify({"message": "Attendance API running"})

    return app


# Run the app
if __name__ == "__main__":
    app = create_app()
    app.logger.info("Server is running on port %s", app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
