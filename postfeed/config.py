"""Gestion centralisée de la configuration du fil de posts."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_FEED_URL = (
    "https://storage.googleapis.com/carousell-interview-assets/ios/ios-se-1a.json"
)
DEFAULT_TIMEOUT = 10.0
DEFAULT_IMAGE_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Erreur levée lorsque la configuration est invalide."""


@dataclass(frozen=True, slots=True)
class FeedConfig:
    """Paramètres nécessaires pour récupérer et afficher les posts."""

    feed_url: str = DEFAULT_FEED_URL
    timeout: float = DEFAULT_TIMEOUT
    image_timeout: float = DEFAULT_IMAGE_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _read_timeout(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} doit être un nombre de secondes, reçu « {raw} ».") from exc

    if value <= 0:
        raise ConfigError(f"{name} doit être strictement positif, reçu « {raw} ».")
    return value


def load_config() -> FeedConfig:
    """Charge la configuration depuis l'environnement (et un éventuel .env)."""
    load_dotenv()

    feed_url = os.getenv("POSTFEED_URL", "").strip() or DEFAULT_FEED_URL
    if not feed_url.startswith(("http://", "https://")):
        raise ConfigError(f"POSTFEED_URL doit être une URL HTTP(S), reçu « {feed_url} ».")

    log_level = os.getenv("POSTFEED_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"POSTFEED_LOG_LEVEL inconnu : « {log_level} ».")

    return FeedConfig(
        feed_url=feed_url,
        timeout=_read_timeout("POSTFEED_TIMEOUT", DEFAULT_TIMEOUT),
        image_timeout=_read_timeout("POSTFEED_IMAGE_TIMEOUT", DEFAULT_IMAGE_TIMEOUT),
        log_level=log_level,
    )
