# polyfaq/utils/logging.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = "INFO"):
    """Configure the root logger once. Safe to call again (e.g. per test app)."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_polyfaq", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._polyfaq = True
        root.addHandler(handler)
