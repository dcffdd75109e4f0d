from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
import logging

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()


def to_dict(db_results):
    return {c.name: getattr(db_results, c.name) for c in db_results.__table__.columns}


def init_db(app):
    # Models must be registered on the metadata before create_all
    import models  # noqa: F401

    with app.app_context():

        @event.listens_for(db.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            import sqlite3

            if not isinstance(dbapi_connection, sqlite3.Connection):
                return

            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON;")
            cursor.execute("PRAGMA busy_timeout=30000;")
            cursor.close()

        from sqlalchemy import inspect

        inspector = inspect(db.engine)
        if not inspector.has_table("tag"):
            logger.info("Initializing database tables...")
        db.create_all()
