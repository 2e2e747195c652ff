from contextlib import contextmanager
from flask import current_app
from orchestra_cms.extensions import db
from .request_context import log_prefix

@contextmanager
def transactional():
    """Commit everything written inside the block, or roll all of it back."""
    try:
        yield db.session
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f"{log_prefix()}Transaction rolled back: {type(e).__name__}")
        raise
