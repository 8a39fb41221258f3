"""Dépôt observable des posts affichés."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, Sequence

from loguru import logger

from postfeed.services import PostsService, PostsServiceError
from postfeed.state import LoadStatus, Post, fallback_posts

Listener = Callable[[Sequence[Post]], None]
Dispatch = Callable[[Callable[[], None]], None]
Spawn = Callable[[Callable[[], None]], None]


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


def _spawn_daemon(target: Callable[[], None]) -> None:
    threading.Thread(target=target, name="postfeed-load", daemon=True).start()


class PostStore:
    """Détient la séquence courante de posts et la logique pour la remplir.

    Toute mutation observée (publication d'une séquence, bascule d'un like)
    passe par ``dispatch`` : avec l'interface Tk, il s'agit du thread
    principal, et les observateurs ne sont jamais notifiés en parallèle.
    """

    def __init__(
        self,
        service: PostsService,
        *,
        dispatch: Dispatch | None = None,
        spawn: Spawn | None = None,
    ) -> None:
        self._service = service
        self._dispatch = dispatch or _run_inline
        self._spawn = spawn or _spawn_daemon
        self._posts: list[Post] = []
        self._status = LoadStatus.IDLE
        self._listeners: list[Listener] = []

    @property
    def posts(self) -> tuple[Post, ...]:
        return tuple(self._posts)

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status is LoadStatus.LOADING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Enregistre un observateur et retourne la fonction de désabonnement."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def get(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    # ------------------------------------------------------------ Chargement -
    def load(self) -> bool:
        """Lance un chargement en arrière-plan.

        Retourne False sans rien faire si un chargement est déjà en cours.
        """
        if self.is_loading:
            logger.debug("Chargement déjà en cours, demande ignorée")
            return False

        self._status = LoadStatus.LOADING
        self._notify()
        try:
            self._spawn(self._fetch_in_background)
        except Exception:  # noqa: BLE001
            logger.exception("Impossible de lancer le chargement en arrière-plan")
            self._use_fallback()
        return True

    def _fetch_in_background(self) -> None:
        try:
            posts = self._service.fetch_posts()
        except PostsServiceError as exc:
            logger.warning("Échec du chargement des posts : {}", exc)
            self._dispatch(self._use_fallback)
            return
        except Exception:  # noqa: BLE001
            logger.exception("Erreur inattendue pendant le chargement des posts")
            self._dispatch(self._use_fallback)
            return

        self._dispatch(lambda: self._publish(posts, LoadStatus.LOADED))

    def _use_fallback(self) -> None:
        logger.info("Utilisation des posts de secours")
        self._publish(fallback_posts(), LoadStatus.FALLEN_BACK)

    def _publish(self, posts: Iterable[Post], status: LoadStatus) -> None:
        self._posts = list(posts)
        self._status = status
        self._notify()

    # ----------------------------------------------------------------- Likes -
    def toggle_like(self, post_id: str) -> bool:
        """Inverse l'état « aimé » d'un post ; sans effet si l'id est inconnu."""
        post = self.get(post_id)
        if post is None:
            logger.debug("Post {} introuvable, like ignoré", post_id)
            return False

        post.is_liked = not post.is_liked
        self._notify()
        return True

    # --------------------------------------------------------------- Interne -
    def _notify(self) -> None:
        snapshot = self.posts
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # noqa: BLE001
                logger.exception("Un observateur du dépôt a échoué")

    def close(self) -> None:
        """Détache tous les observateurs ; un chargement tardif reste sans effet visible."""
        self._listeners.clear()
