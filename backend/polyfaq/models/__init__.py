# polyfaq/models/__init__.py
from polyfaq.models.faq import FAQ, project_translation
