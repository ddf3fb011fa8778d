from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from sitebuilder.extensions import db
from sitebuilder.domain.exceptions import StorageError

@contextmanager
def transactional():
    """
    Context manager for database transactions.

    Commits on success, rolls back on any failure. Backend failures surface as
    StorageError; domain errors propagate unchanged.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError.from_exception(exc) from exc
    except Exception:
        db.session.rollback()
        raise
