# polyfaq/services/faq_service.py
import logging
from starlette.concurrency import run_in_threadpool

from polyfaq.exceptions import FAQValidationError
from polyfaq.models.faq import FAQ
from polyfaq.services.cache_service import CacheService
from polyfaq.services.faq_store import FAQStore
from polyfaq.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

class FAQService:
    def __init__(
        self,
        store: FAQStore,
        cache: CacheService,
        translator: TranslationService,
        target_languages: list[str],
        default_language: str = "en",
        invalidate_on_create: bool = False,
    ):
        self.store = store
        self.cache = cache
        self.translator = translator
        self.target_languages = list(target_languages)
        self.default_language = default_language
        self.invalidate_on_create = invalidate_on_create

    async def list_faqs(self, lang: str | None = None) -> list[dict]:
        """
        Read-through list of FAQs projected into lang.
        1. Cache hit -> returned as stored, the store is not touched.
        2. Miss -> load every FAQ, project, then fill the cache (best-effort).
        """
        lang = lang or self.default_language

        cached = await self.cache.get(lang)
        if cached is not None:
            return cached

        records = await run_in_threadpool(self.store.find_all)
        projected = [record.project(lang) for record in records]

        # A failed write only costs the next request a store read.
        result = await self.cache.set(lang, projected)
        if not result.ok:
            logger.warning("Cache write for '%s' skipped: %s", lang, result.error)

        return projected

    async def create_faq(self, question: str | None, answer: str | None) -> FAQ:
        """
        Translates question/answer into every target language, then persists.
        Translation never fails the request (falls back to the source text).
        """
        if not question or not question.strip():
            raise FAQValidationError("question is required")
        if not answer or not answer.strip():
            raise FAQValidationError("answer is required")

        translations = await self.translator.translate_fields(
            {"question": question, "answer": answer}, self.target_languages
        )

        record = FAQ(question=question, answer=answer, translations=translations)
        saved = await run_in_threadpool(self.store.insert, record)
        logger.info("Created FAQ %s with translations %s", saved.id, sorted(translations))

        if self.invalidate_on_create:
            result = await self.cache.invalidate([self.default_language, *self.target_languages])
            if not result.ok:
                logger.warning("Cache invalidation after FAQ %s failed: %s", saved.id, result.error)

        return saved
