import logging

from salondb.extensions import db

logger = logging.getLogger(__name__)

def ensure_schema():
    """
    Creates every table that does not exist yet. Existing tables and their
    rows are left alone, so this runs on every start.
    Must be called inside an application context.
    """
    from salondb import models  # noqa: F401  registers the tables on db.metadata
    db.create_all()
    logger.info("Database tables created successfully")
