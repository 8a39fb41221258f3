"""Structures de données partagées entre la couche UI et les services."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/150"


def _new_post_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class Post:
    """Un post affiché dans la liste.

    L'identifiant est généré localement à la construction : deux posts au
    contenu identique restent deux lignes distinctes.
    """

    text: str
    image: str | None = None
    is_liked: bool = False
    id: str = field(default_factory=_new_post_id)

    @property
    def has_image(self) -> bool:
        return self.image is not None


class LoadStatus(enum.Enum):
    """Cycle de vie d'un chargement du fil."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FALLEN_BACK = "fallen_back"


def fallback_posts() -> list[Post]:
    """Retourne un nouveau jeu de trois posts de secours."""
    return [
        Post(text="Short text with an image.", image=PLACEHOLDER_IMAGE_URL),
        Post(
            text=(
                "Long text with an image. This text explains more details about the "
                "post and continues for several lines to simulate a longer description."
            ),
            image=PLACEHOLDER_IMAGE_URL,
        ),
        Post(text="This is a post without an image."),
    ]
