# polyfaq/services/faq_store.py
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from polyfaq.exceptions import PersistenceError
from polyfaq.models.faq import FAQ

logger = logging.getLogger(__name__)

class FAQStore:
    """Blocking SQLAlchemy access to the faqs table. One session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def find_all(self) -> list[FAQ]:
        db = self.session_factory()
        try:
            return db.query(FAQ).order_by(FAQ.id).all()
        except SQLAlchemyError as e:
            logger.exception("Failed to load FAQs")
            raise PersistenceError("Failed to load FAQs") from e
        finally:
            db.close()

    def insert(self, record: FAQ) -> FAQ:
        db = self.session_factory()
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
            return record
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Failed to save FAQ")
            raise PersistenceError("Failed to save FAQ") from e
        finally:
            db.close()

    def clear(self) -> int:
        db = self.session_factory()
        try:
            deleted = db.query(FAQ).delete()
            db.commit()
            return deleted
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceError("Failed to clear FAQs") from e
        finally:
            db.close()
