import os


def _optional_int(name: str, default=None):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


class Settings:
    PROJECT_NAME: str = "kanadle"
    DEBUG: bool = os.environ.get("KANADLE_DEBUG", "") == "1"
    LOG_DIR: str = os.environ.get("KANADLE_LOG_DIR", "log")
    LOG_FILE: str = "kanadle.log"
    LOG_LEVEL: str = os.environ.get("KANADLE_LOG_LEVEL", "INFO")
    DATA_DIR: str = os.environ.get("KANADLE_DATA_DIR", "json")
    WORD_LENGTH: int = 4
    # None means the game continues until the answer is found.
    MAX_ATTEMPTS = _optional_int("KANADLE_MAX_ATTEMPTS")
    # None means keep trying until every eligible leading symbol was tried.
    START_RETRIES = _optional_int("KANADLE_START_RETRIES")


settings = Settings()
