"""Récupération et décodage du fil de posts distant."""

from __future__ import annotations

import requests
from loguru import logger
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from postfeed.config import FeedConfig
from postfeed.state import Post


class PostsServiceError(RuntimeError):
    """Erreur générique levée lors de la récupération des posts."""


class PostPayload(BaseModel):
    """Forme attendue d'un post dans la réponse JSON."""

    model_config = ConfigDict(extra="ignore")

    content: str
    image_url: str | None = None

    def to_post(self) -> Post:
        return Post(text=self.content, image=self.image_url)


_PAYLOAD_ADAPTER = TypeAdapter(list[PostPayload])


def decode_posts(payload: bytes | str) -> list[Post]:
    """Décode un tableau JSON de posts ; chaque post reçoit un nouvel identifiant."""
    if not payload or not payload.strip():
        raise PostsServiceError("Réponse vide.")

    try:
        records = _PAYLOAD_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise PostsServiceError(
            f"Réponse invalide ({exc.error_count()} erreur(s) de format)."
        ) from exc

    return [record.to_post() for record in records]


class PostsService:
    """Service responsable de l'appel HTTP vers le fil de posts."""

    def __init__(self, config: FeedConfig, *, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def fetch_posts(self) -> list[Post]:
        """Effectue un unique GET et retourne les posts décodés."""
        logger.debug("GET {}", self._config.feed_url)
        try:
            response = self._session.get(self._config.feed_url, timeout=self._config.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise PostsServiceError(f"Statut HTTP inattendu : {exc}") from exc
        except requests.RequestException as exc:
            raise PostsServiceError(f"Impossible de joindre le serveur : {exc}") from exc

        posts = decode_posts(response.content)
        logger.info("{} post(s) reçus depuis {}", len(posts), self._config.feed_url)
        return posts

    def close(self) -> None:
        self._session.close()
