"""Configuration des journaux de l'application avec loguru."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: str = "INFO") -> None:
    """Remplace le handler par défaut par une sortie stderr lisible."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, backtrace=False, diagnose=False)
    logger.debug("Journalisation initialisée au niveau {}", level)
