"""
Tasks API: a to-do list served over JSON and kept in a flat file.
"""

from flask import Flask

from .config import Config


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.from_mapping(config)

    # Keep Task fields in id, title, completed, createdAt order
    app.json.sort_keys = False

    from .routes import ping_bp, tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/api")
    app.register_blueprint(ping_bp)
    return app
