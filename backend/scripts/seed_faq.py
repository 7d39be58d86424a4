# backend/scripts/seed_faq.py
import sys
import os
import asyncio

# Path Setup
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

from polyfaq.config import settings
from polyfaq.database.connection import build_engine, build_session_factory, init_db
from polyfaq.services.cache_service import CacheService
from polyfaq.services.faq_service import FAQService
from polyfaq.services.faq_store import FAQStore
from polyfaq.services.translation_service import TranslationService
from polyfaq.utils.logging import setup_logging

# 1. Define the starter Q&A pairs
faq_data = [
    {
        "question": "How do I reset my password?",
        "answer": "Open Settings, choose Account and click 'Reset password'. A reset link is emailed to you within a few minutes.",
    },
    {
        "question": "Which languages are supported?",
        "answer": "Every FAQ is available in English, Hindi and Bengali.",
    },
    {
        "question": "How long does delivery take?",
        "answer": "Standard delivery takes 3 to 5 working days. Express delivery arrives the next working day.",
    },
    {
        "question": "Can I cancel my order?",
        "answer": "Orders can be cancelled free of charge until they are dispatched.",
    },
    {
        "question": "How do I contact support?",
        "answer": "Write to support through the Help page. We reply within one working day.",
    },
]

async def seed_faqs():
    print("--- Seeding FAQs (translating into %s) ---" % ", ".join(settings.TARGET_LANGUAGES))

    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    cache = CacheService.from_settings(settings)

    # Invalidate on create so the seeded entries are visible immediately
    service = FAQService(
        store=FAQStore(build_session_factory(engine)),
        cache=cache,
        translator=TranslationService(settings.TRANSLATION_SOURCE_LANGUAGE),
        target_languages=settings.TARGET_LANGUAGES,
        default_language=settings.DEFAULT_LANGUAGE,
        invalidate_on_create=True,
    )

    count = 0
    try:
        for item in faq_data:
            print(f"Processing: {item['question']}")
            faq = await service.create_faq(item["question"], item["answer"])
            print(f"   -> saved with id {faq.id}")
            count += 1
    finally:
        await cache.close()
        engine.dispose()

    print(f"--- Success! Seeded {count} FAQs ---")

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed_faqs())
