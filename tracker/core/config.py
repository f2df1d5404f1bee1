from os import getenv


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # pas de DATABASE_URL => stockage en mémoire
    DATABASE_URL = getenv("DATABASE_URL") or None
    SEED_DEFAULT_CATEGORIES = _flag(getenv("SEED_DEFAULT_CATEGORIES", "true"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()
    FOCUS_WINDOW_DAYS = int(getenv("FOCUS_WINDOW_DAYS", "30"))

settings = Settings()
