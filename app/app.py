"""
Answer - activity timeline and tag API
Application factory
"""
import os
import sys
import logging

import flask.cli
flask.cli.show_server_banner = lambda *args: None

from flask import Flask
import structlog

from constants import ANSWER_DB, BUILD_VERSION
from db import db, init_db
from exceptions import register_exception_handlers
from settings import load_settings
from utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs

# Routes
from routes.activity import activity_bp
from routes.tag import tag_bp

# Logging configuration
formatter = ColoredFormatter(
    '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(formatter)

logging.basicConfig(
    level=logging.INFO,
    handlers=[handler]
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger('main')

# Apply filter to hide date from http access logs
logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())


def create_app(config=None):
    """Build the Flask application; `config` overrides the defaults"""
    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = ANSWER_DB
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    if config:
        app.config.update(config)

    if not app.config.get("TESTING"):
        load_settings()

    db.init_app(app)
    init_db(app)

    register_exception_handlers(app)
    app.register_blueprint(activity_bp)
    app.register_blueprint(tag_bp)

    logger.info("Application initialized", build=BUILD_VERSION, database=app.config["SQLALCHEMY_DATABASE_URI"])
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host=os.environ.get('HOST', '0.0.0.0'), port=int(os.environ.get('PORT', 8465)))
