# polyfaq/models/faq.py
from sqlalchemy import Column, Integer, Text, DateTime, JSON
from sqlalchemy.sql import func
from polyfaq.database.connection import Base


def project_translation(question: str, answer: str, translations, lang: str) -> dict:
    """
    Language view of a FAQ. Missing translation entries, or missing fields
    inside an entry, fall back to the canonical question/answer.
    """
    entry = translations.get(lang) if isinstance(translations, dict) else None
    if not isinstance(entry, dict):
        return {"question": question, "answer": answer}

    return {
        "question": entry.get("question") or question,
        "answer": entry.get("answer") or answer,
    }


class FAQ(Base):
    """
    Canonical FAQ entry plus translations computed at creation time.
    translations: {"hi": {"question": ..., "answer": ...}, "bn": {...}}
    """
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    translations = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def project(self, lang: str) -> dict:
        return project_translation(self.question, self.answer, self.translations, lang)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "translations": dict(self.translations or {}),
        }
