# comment_service/__init__.py

import logging
from flask import Flask
from flask.logging import default_handler
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Configure logging; level comes from LOG_LEVEL (INFO by default)
    level = logging.getLevelName(app.config.get('LOG_LEVEL', 'INFO'))
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)
    # Apps share one named logger, so the stream handler is attached only once
    app.logger.removeHandler(default_handler)
    if not app.logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
    for handler in app.logger.handlers:
        handler.setLevel(level)

    base_path = app.config['ROUTER_BASE_PATH'].rstrip('/')

    # The comment form is served from the blog's own domain; locally anything goes.
    if app.config['APP_ENV'] == 'dev':
        allow_origin = '*'
    else:
        allow_origin = f"https://{app.config['SITE_DOMAIN']}"

    CORS(app, resources={f"{base_path}/*": {"origins": allow_origin}})

    from .api.comments import bp as comments_bp
    app.register_blueprint(comments_bp, url_prefix=base_path)

    app.logger.debug(f"Comment endpoint mounted at {base_path}/post")

    return app
