"""Passage des résultats des threads de travail vers la boucle Tk."""

from __future__ import annotations

import queue
from typing import TYPE_CHECKING, Callable

from loguru import logger

if TYPE_CHECKING:
    import tkinter as tk

POLL_INTERVAL_MS = 50


class MainThreadDispatcher:
    """File d'attente vidée périodiquement par ``root.after``.

    ``submit`` peut être appelé depuis n'importe quel thread ; les callbacks
    sont exécutés dans l'ordre d'arrivée sur le thread qui appelle ``drain``.
    """

    def __init__(self, root: tk.Misc, *, interval_ms: int = POLL_INTERVAL_MS) -> None:
        self._root = root
        self._interval_ms = interval_ms
        self._queue: queue.SimpleQueue[Callable[[], None]] = queue.SimpleQueue()
        self._after_id: str | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, callback: Callable[[], None]) -> None:
        if self._closed:
            return
        self._queue.put(callback)

    def drain(self) -> int:
        """Exécute les callbacks en attente et retourne leur nombre."""
        executed = 0
        while not self._closed:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                break
            try:
                callback()
            except Exception:  # noqa: BLE001
                logger.exception("Un callback du thread principal a échoué")
            executed += 1
        return executed

    def start(self) -> None:
        if self._closed or self._after_id is not None:
            return
        self._after_id = self._root.after(self._interval_ms, self._poll)

    def _poll(self) -> None:
        self._after_id = None
        self.drain()
        self.start()

    def close(self) -> None:
        self._closed = True
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except ValueError:
                pass
            self._after_id = None
