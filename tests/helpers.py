import json

import requests

from postfeed.store import PostStore


def make_response(status_code: int = 200, body: bytes | str | list | dict = b"") -> requests.Response:
    """Construit une vraie réponse requests sans passer par le réseau."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://feed.test/posts.json"
    if isinstance(body, (list, dict)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body
    return response


class FakeService:
    """Service de test : renvoie des posts ou lève l'erreur configurée."""

    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.calls = 0

    def fetch_posts(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.result)


def run_now(work):
    work()


def inline_store(service, **kwargs):
    """PostStore dont le chargement s'exécute dans le thread appelant."""
    kwargs.setdefault("spawn", run_now)
    return PostStore(service, **kwargs)
