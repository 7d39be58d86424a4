# backend/tests/test_faq_store.py
import pytest

from polyfaq.database.connection import Base
from polyfaq.exceptions import PersistenceError
from polyfaq.models.faq import FAQ


def test_insert_assigns_id(store):
    saved = store.insert(FAQ(question="Q", answer="A", translations={"hi": {"question": "q", "answer": "a"}}))

    assert saved.id is not None
    assert saved.translations == {"hi": {"question": "q", "answer": "a"}}


def test_find_all_keeps_insertion_order(store):
    for i in range(3):
        store.insert(FAQ(question=f"Q{i}", answer=f"A{i}", translations={}))

    assert [faq.question for faq in store.find_all()] == ["Q0", "Q1", "Q2"]


def test_insert_without_required_field_raises_persistence_error(store):
    with pytest.raises(PersistenceError):
        store.insert(FAQ(question=None, answer="A", translations={}))

    # Session was rolled back, the store is still usable
    store.insert(FAQ(question="Q", answer="A", translations={}))
    assert len(store.find_all()) == 1


def test_find_all_on_missing_table_raises_persistence_error(store, engine):
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(PersistenceError):
        store.find_all()


def test_clear_deletes_everything(store):
    store.insert(FAQ(question="Q", answer="A", translations={}))
    store.insert(FAQ(question="Q2", answer="A2", translations={}))

    assert store.clear() == 2
    assert store.find_all() == []
