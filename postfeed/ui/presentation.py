"""Textes et couleurs dérivés de l'état, sans dépendance à Tk."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

from postfeed.state import LoadStatus, Post

LIKED_COLOR = "#EF4444"
UNLIKED_COLOR = "#9CA3AF"


class LikeAffordance(NamedTuple):
    icon: str
    label: str
    color: str

    @property
    def text(self) -> str:
        return f"{self.icon} {self.label}"


def like_affordance(is_liked: bool) -> LikeAffordance:
    if is_liked:
        return LikeAffordance("♥", "Liked", LIKED_COLOR)
    return LikeAffordance("♡", "Like", UNLIKED_COLOR)


def status_message(status: LoadStatus, count: int) -> str:
    """Ligne d'état affichée sous le titre."""
    if status is LoadStatus.LOADING:
        return "Chargement…"
    if status is LoadStatus.FALLEN_BACK:
        return "Hors ligne – posts d'exemple"
    if status is LoadStatus.LOADED:
        return f"{count} post(s)"
    return ""


class RowPlan(NamedTuple):
    """Cartes à créer, mettre à jour et détruire, puis ordre d'affichage."""

    create: tuple[str, ...]
    update: tuple[str, ...]
    destroy: tuple[str, ...]
    order: tuple[str, ...]


def plan_rows(existing_ids: Iterable[str], posts: Sequence[Post]) -> RowPlan:
    """Réconcilie les cartes affichées avec la séquence, par identifiant de post."""
    existing = set(existing_ids)
    order = tuple(post.id for post in posts)
    wanted = set(order)
    return RowPlan(
        create=tuple(post_id for post_id in order if post_id not in existing),
        update=tuple(post_id for post_id in order if post_id in existing),
        destroy=tuple(sorted(existing - wanted)),
        order=order,
    )
