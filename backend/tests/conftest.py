# backend/tests/conftest.py
import fnmatch

import pytest
import redis
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from polyfaq.config import Settings
from polyfaq.database.connection import build_engine, build_session_factory, init_db
from polyfaq.main import create_app
from polyfaq.services.cache_service import CacheService
from polyfaq.services.faq_service import FAQService
from polyfaq.services.faq_store import FAQStore
from polyfaq.services.translation_service import TranslationService


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis (only the calls the app makes)."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.fail = False
        self.closed = False

    def _check(self):
        if self.fail:
            raise redis.ConnectionError("Connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self._check()
        self.data[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, *keys):
        self._check()
        deleted = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                self.ttls.pop(key, None)
                deleted += 1
        return deleted

    async def scan_iter(self, match="*"):
        self._check()
        for key in list(self.data):
            if fnmatch.fnmatch(key, match):
                yield key

    def expire_all(self):
        self.data.clear()
        self.ttls.clear()

    async def aclose(self):
        self.closed = True


class StubProvider:
    """Mimics deep_translator.GoogleTranslator: prefixes text with the target tag."""

    def __init__(self, source="auto", target="en"):
        self.source = source
        self.target = target

    def translate(self, text):
        return f"[{self.target}] {text}"


class FailingProvider:
    def __init__(self, source="auto", target="en"):
        self.target = target

    def translate(self, text):
        raise ConnectionError("quota exceeded")


@pytest.fixture
def engine():
    db_engine = build_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def store(engine):
    return FAQStore(build_session_factory(engine))


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def cache(fake_redis):
    return CacheService(fake_redis, prefix="faqs", ttl_seconds=3600)


@pytest.fixture
def translator():
    return TranslationService(translator_factory=StubProvider)


@pytest.fixture
def failing_translator():
    return TranslationService(translator_factory=FailingProvider)


@pytest.fixture
def service(store, cache, translator):
    return FAQService(store, cache, translator, target_languages=["hi", "bn"])


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", TARGET_LANGUAGES=["hi", "bn"], LOG_LEVEL="DEBUG")


@pytest.fixture
def client(settings, engine, fake_redis, translator):
    app = create_app(settings, engine=engine, cache_client=fake_redis, translator=translator)
    with TestClient(app) as test_client:
        yield test_client
