import logging
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(levelname)s | %(name)s | %(message)s")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for applications embedding the validator."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
        force=True,
    )
