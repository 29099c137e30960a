from __future__ import annotations

import logging
import sys

from autotag.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request chatter from the HTTP stack underneath the OpenAI SDK
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the service.

    `level` overrides `settings.log_level`. Outside debug mode the HTTP client
    loggers are held at WARNING so request lines do not drown tag results.
    """
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stdout)

    logging.getLogger("autotag").setLevel(resolved)
    logging.getLogger("uvicorn").setLevel(logging.INFO)

    noisy_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    logging.getLogger(__name__).info("Logging configured at %s", logging.getLevelName(resolved))


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
