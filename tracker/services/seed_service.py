"""Default categories"""

import logging

from tracker.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"slug": "work", "name": "Work Projects", "color": "#5E81AC"},
    {"slug": "learning", "name": "Learning", "color": "#88C0D0"},
    {"slug": "health", "name": "Health & Fitness", "color": "#A3BE8C"},
    {"slug": "personal", "name": "Personal Projects", "color": "#BF616A"},
    {"slug": "reading", "name": "Reading", "color": "#3B4252"},
    {"slug": "reflection", "name": "Reflection", "color": "#2E3440"},
]


def seed_default_categories(storage) -> int:
    """
    Crée les catégories par défaut si aucune catégorie n'existe.

    Idempotent: a store that already has categories is left untouched.
    Returns the number of categories created.
    """
    if storage.list_categories():
        return 0

    for category in DEFAULT_CATEGORIES:
        storage.create_category(CategoryCreate(**category))

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
