"""Téléchargement des images de posts."""

from __future__ import annotations

import io
import threading
from typing import Callable
from urllib.request import urlopen

from loguru import logger
from PIL import Image, ImageOps

THUMBNAIL_SIZE = (100, 100)

ImageCallback = Callable[[Image.Image | None], None]
Dispatch = Callable[[Callable[[], None]], None]


def fetch_image(
    url: str,
    size: tuple[int, int] = THUMBNAIL_SIZE,
    *,
    timeout: float = 5,
) -> Image.Image | None:
    """Télécharge une image et la recadre à ``size`` ; None en cas d'échec."""
    try:
        with urlopen(url, timeout=timeout) as response:
            buffer = io.BytesIO(response.read())
    except Exception as exc:  # noqa: BLE001
        logger.debug("Image {} indisponible : {}", url, exc)
        return None

    try:
        image = Image.open(buffer).convert("RGBA")
        return ImageOps.fit(image, size, Image.LANCZOS)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Image {} illisible : {}", url, exc)
        return None


class ImageLoader:
    """Charge les images en arrière-plan et livre le résultat via ``dispatch``."""

    def __init__(
        self,
        dispatch: Dispatch,
        *,
        timeout: float = 5,
        size: tuple[int, int] = THUMBNAIL_SIZE,
        spawn: Callable[[Callable[[], None]], None] | None = None,
    ) -> None:
        self._dispatch = dispatch
        self._timeout = timeout
        self._size = size
        self._spawn = spawn or self._spawn_daemon

    @staticmethod
    def _spawn_daemon(target: Callable[[], None]) -> None:
        threading.Thread(target=target, name="postfeed-image", daemon=True).start()

    def request(self, url: str, callback: ImageCallback) -> None:
        def work() -> None:
            image = fetch_image(url, self._size, timeout=self._timeout)
            self._dispatch(lambda: callback(image))

        self._spawn(work)
