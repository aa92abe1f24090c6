"""
Database connection attempts through SQLAlchemy.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

logger = logging.getLogger(__name__)


def connect_args_for(database_url: str, timeout: int) -> dict:
    """Driver-specific connect arguments carrying the timeout."""
    if make_url(database_url).get_backend_name() == 'sqlite':
        return {'timeout': timeout}
    return {'connect_timeout': timeout}


def attempt_connection(database_url: str, timeout: int = 5):
    """
    Open one connection and close it again.

    The engine is disposed whether or not the connection succeeded.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the database cannot be reached
    """
    engine = create_engine(
        database_url,
        echo=False,
        connect_args=connect_args_for(database_url, timeout),
    )
    try:
        with engine.connect():
            logger.info(f"Connected to {engine.url!r}")
    finally:
        engine.dispose()
