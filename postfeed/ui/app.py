"""Interface Tkinter principale."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Sequence

import sv_ttk
from loguru import logger
from PIL import Image, ImageTk

from postfeed.state import Post
from postfeed.store import PostStore
from postfeed.ui.dispatch import MainThreadDispatcher
from postfeed.ui.images import THUMBNAIL_SIZE, ImageLoader
from postfeed.ui.presentation import like_affordance, plan_rows, status_message

BACKGROUND_COLOR = "#121212"
CARD_COLOR = "#181818"
STATUS_NEUTRAL_COLOR = "#B3B3B3"
PLACEHOLDER_COLOR = "#2B2B2B"
WINDOW_SIZE = (520, 760)
TEXT_WRAP_PADDING = 200


class PostRow:
    """Carte affichant un post : image optionnelle, texte et bouton like."""

    def __init__(
        self,
        parent: tk.Misc,
        post: Post,
        *,
        images: ImageLoader,
        on_toggle: Callable[[str], None],
    ) -> None:
        self.post_id = post.id
        self._photo: ImageTk.PhotoImage | None = None
        self._image_label: tk.Label | None = None

        self.frame = ttk.Frame(parent, style="Card.TFrame", padding=(16, 14))
        self.frame.columnconfigure(1, weight=1)

        if post.has_image:
            # Une image vide force l'unité pixel pour width/height.
            self._blank = tk.PhotoImage(width=1, height=1)
            self._image_label = tk.Label(
                self.frame,
                text="…",
                width=THUMBNAIL_SIZE[0],
                height=THUMBNAIL_SIZE[1],
                bg=PLACEHOLDER_COLOR,
                fg=STATUS_NEUTRAL_COLOR,
                bd=0,
                image=self._blank,
                compound=tk.CENTER,
            )
            self._image_label.grid(row=0, column=0, sticky="nw", padx=(0, 12))
            images.request(post.image, self._show_image)

        self._text_label = ttk.Label(
            self.frame,
            text=post.text,
            style="PostText.TLabel",
            wraplength=WINDOW_SIZE[0] - TEXT_WRAP_PADDING,
            justify=tk.LEFT,
        )
        self._text_label.grid(row=0, column=1, sticky="nw")

        self._like_button = tk.Button(
            self.frame,
            command=lambda: on_toggle(self.post_id),
            bg=CARD_COLOR,
            activebackground=CARD_COLOR,
            relief=tk.FLAT,
            bd=0,
            cursor="hand2",
            font=("Helvetica", 11),
        )
        self._like_button.grid(row=1, column=0, columnspan=2, sticky="w", pady=(10, 0))

        self.update(post)

    def update(self, post: Post) -> None:
        affordance = like_affordance(post.is_liked)
        self._like_button.configure(
            text=affordance.text,
            fg=affordance.color,
            activeforeground=affordance.color,
        )

    def _show_image(self, image: Image.Image | None) -> None:
        if self._image_label is None or not self._image_label.winfo_exists():
            return

        if image is None:
            self._image_label.configure(text="")
            return

        self._photo = ImageTk.PhotoImage(image)
        self._image_label.configure(image=self._photo, text="")

    def destroy(self) -> None:
        self.frame.destroy()


class MainWindow:
    """Fenêtre principale de l'application."""

    def __init__(
        self,
        store_factory: Callable[[MainThreadDispatcher], PostStore],
        *,
        image_timeout: float = 5,
    ) -> None:
        self.root = tk.Tk()
        self.root.title("Posts")
        self.root.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")
        self.root.minsize(*WINDOW_SIZE)

        sv_ttk.set_theme("dark")
        self.root.configure(bg=BACKGROUND_COLOR)
        self._configure_styles()

        self._dispatcher = MainThreadDispatcher(self.root)
        self._store = store_factory(self._dispatcher)
        self._images = ImageLoader(self._dispatcher.submit, timeout=image_timeout)
        self._rows: dict[str, PostRow] = {}
        self._status_var = tk.StringVar()

        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(1, weight=1)

        self._build_header()
        self._build_list()

        self._unsubscribe = self._store.subscribe(self._render)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # --------------------------------------------------------------------- UI -
    def _configure_styles(self) -> None:
        style = ttk.Style()
        style.configure("Main.TFrame", background=BACKGROUND_COLOR)
        style.configure("Card.TFrame", background=CARD_COLOR)
        style.configure(
            "HeaderTitle.TLabel",
            background=BACKGROUND_COLOR,
            foreground="#FFFFFF",
            font=("Helvetica", 20, "bold"),
        )
        style.configure(
            "Status.TLabel",
            background=BACKGROUND_COLOR,
            foreground=STATUS_NEUTRAL_COLOR,
            font=("Helvetica", 11),
        )
        style.configure(
            "PostText.TLabel",
            background=CARD_COLOR,
            foreground="#FFFFFF",
            font=("Helvetica", 12),
        )
        self.root.option_add("*Font", "Helvetica 11")

    def _build_header(self) -> None:
        frame = ttk.Frame(self.root, style="Main.TFrame", padding=(24, 16, 24, 8))
        frame.grid(row=0, column=0, sticky="ew")
        frame.columnconfigure(0, weight=1)

        ttk.Label(frame, text="Posts", style="HeaderTitle.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        ttk.Label(frame, textvariable=self._status_var, style="Status.TLabel").grid(
            row=1, column=0, sticky="w"
        )

        self._refresh_button = ttk.Button(frame, text="Actualiser", command=self.refresh)
        self._refresh_button.grid(row=0, column=1, rowspan=2, sticky="e")

    def _build_list(self) -> None:
        container = ttk.Frame(self.root, style="Main.TFrame", padding=(24, 8, 24, 16))
        container.grid(row=1, column=0, sticky="nsew")
        container.columnconfigure(0, weight=1)
        container.rowconfigure(0, weight=1)

        self._canvas = tk.Canvas(container, bg=BACKGROUND_COLOR, highlightthickness=0, bd=0)
        self._canvas.grid(row=0, column=0, sticky="nsew")

        scrollbar = ttk.Scrollbar(container, orient=tk.VERTICAL, command=self._canvas.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        self._canvas.configure(yscrollcommand=scrollbar.set)

        self._list_frame = ttk.Frame(self._canvas, style="Main.TFrame")
        self._list_frame.columnconfigure(0, weight=1)
        window_id = self._canvas.create_window((0, 0), window=self._list_frame, anchor="nw")

        self._list_frame.bind(
            "<Configure>",
            lambda _: self._canvas.configure(scrollregion=self._canvas.bbox("all")),
        )
        self._canvas.bind(
            "<Configure>",
            lambda event: self._canvas.itemconfigure(window_id, width=event.width),
        )

    # -------------------------------------------------------------- Rendu -
    def _render(self, posts: Sequence[Post]) -> None:
        """Synchronise les cartes avec la séquence du dépôt, par identifiant."""
        plan = plan_rows(self._rows, posts)
        by_id = {post.id: post for post in posts}

        for post_id in plan.destroy:
            self._rows.pop(post_id).destroy()
        for post_id in plan.update:
            self._rows[post_id].update(by_id[post_id])
        for post_id in plan.create:
            self._rows[post_id] = PostRow(
                self._list_frame,
                by_id[post_id],
                images=self._images,
                on_toggle=self.toggle_like,
            )

        for index, post_id in enumerate(plan.order):
            self._rows[post_id].frame.grid(row=index, column=0, sticky="ew", pady=(0, 12))

        self._status_var.set(status_message(self._store.status, len(posts)))
        self._refresh_button.configure(
            state=tk.DISABLED if self._store.is_loading else tk.NORMAL
        )

    # --------------------------------------------------------------- Callbacks -
    def toggle_like(self, post_id: str) -> None:
        self._store.toggle_like(post_id)

    def refresh(self) -> None:
        self._store.load()

    def close(self) -> None:
        logger.debug("Fermeture de la fenêtre")
        self._unsubscribe()
        self._store.close()
        self._dispatcher.close()
        self.root.destroy()

    # ----------------------------------------------------------------- Public -
    def run(self) -> None:
        self._dispatcher.start()
        self._store.load()
        self.root.mainloop()
