# backend/scripts/clear_data.py
import sys
import os
import asyncio

# --- Path Setup ---
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

from polyfaq.config import settings
from polyfaq.database.connection import build_engine, build_session_factory, init_db
from polyfaq.exceptions import PersistenceError
from polyfaq.services.cache_service import CacheService
from polyfaq.services.faq_store import FAQStore

def clear_database_tables():
    """Deletes all records from the faqs table."""
    print("--- Clearing Database Tables ---")
    engine = build_engine(settings.DATABASE_URL)
    init_db(engine)
    try:
        deleted = FAQStore(build_session_factory(engine)).clear()
        print(f"Deleted {deleted} FAQ records.")
        print("--- Database tables cleared successfully. ---")
    except PersistenceError as e:
        print(f"An error occurred while clearing the database: {e}")
    finally:
        engine.dispose()

async def clear_cached_lists():
    """Deletes every cached FAQ list (all languages)."""
    print("\n--- Clearing Cached FAQ Lists ---")
    cache = CacheService.from_settings(settings)
    try:
        deleted = await cache.clear_all()
        print(f"Deleted {deleted} cache keys under '{settings.CACHE_KEY_PREFIX}:*'.")
    except Exception as e:
        print(f"Redis not reachable, nothing cleared: {e}")
    finally:
        await cache.close()


if __name__ == "__main__":
    clear_database_tables()
    asyncio.run(clear_cached_lists())
    print("\nOperation completed.")
