# polyfaq/services/translation_service.py
import asyncio
import logging
from deep_translator import GoogleTranslator
from polyfaq.exceptions import TranslationFailure

logger = logging.getLogger(__name__)

class TranslationService:
    def __init__(self, source_language: str = "auto", translator_factory=GoogleTranslator):
        self.source_language = source_language
        # Called as translator_factory(source=..., target=...) -> object with .translate(text)
        self.translator_factory = translator_factory

    def _call_provider(self, text: str, target_language: str) -> str:
        try:
            translator = self.translator_factory(source=self.source_language, target=target_language)
            result = translator.translate(text)
        except Exception as e:
            raise TranslationFailure(f"{target_language}: {e}") from e

        if not isinstance(result, str) or not result.strip():
            raise TranslationFailure(f"{target_language}: empty or malformed response {result!r}")
        return result

    def translate(self, text: str, target_language: str) -> str:
        """
        Translates text, returning the original text if the provider fails.
        Never raises.
        """
        if not text or not text.strip():
            return text

        try:
            return self._call_provider(text, target_language)
        except TranslationFailure as e:
            logger.warning("Translation error, using original text: %s", e)
            return text

    async def translate_async(self, text: str, target_language: str) -> str:
        # deep_translator is blocking (requests), keep it off the event loop
        return await asyncio.to_thread(self.translate, text, target_language)

    async def translate_fields(self, fields: dict, target_languages: list) -> dict:
        """
        Translates every field into every target language concurrently.

        fields: {"question": "...", "answer": "..."}
        returns: {"hi": {"question": "...", "answer": "..."}, "bn": {...}}
        """
        jobs = [
            (lang, name, self.translate_async(text, lang))
            for lang in target_languages
            for name, text in fields.items()
        ]
        results = await asyncio.gather(*(job for _, _, job in jobs))

        translations = {lang: {} for lang in target_languages}
        for (lang, name, _), text in zip(jobs, results):
            translations[lang][name] = text
        return translations
