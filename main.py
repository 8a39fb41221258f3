"""Point d'entrée de l'application postfeed."""

from __future__ import annotations

import sys

from loguru import logger

from postfeed.config import ConfigError, load_config
from postfeed.log import setup_logging
from postfeed.services import PostsService
from postfeed.store import PostStore
from postfeed.ui.app import MainWindow


def main() -> None:
    """Initialise les dépendances puis lance l'interface Tkinter."""
    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Configuration invalide : {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    setup_logging(config.log_level)
    logger.info("Fil de posts : {}", config.feed_url)

    service = PostsService(config)
    app = MainWindow(
        lambda dispatcher: PostStore(service, dispatch=dispatcher.submit),
        image_timeout=config.image_timeout,
    )
    try:
        app.run()
    finally:
        service.close()


if __name__ == "__main__":
    main()
