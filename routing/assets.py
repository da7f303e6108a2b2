"""View fragment and stylesheet lookup.

`AssetResolver` maps names to conventional paths; an asset source fetches
those paths, either from the packaged `assets/` directory or over HTTP.
"""
import logging
import os
from typing import Optional

import requests

from domain.models import FetchResponse

logger = logging.getLogger(__name__)


class AssetResolver:
    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def view_url(self, name: str) -> str:
        return f"{self.prefix}views/{name}.html"

    def style_url(self, name: str) -> str:
        return f"{self.prefix}styles/{name}.css"


class LocalAssetSource:
    """Serves asset paths from a directory with GET-like semantics."""

    def __init__(self, base_dir: str):
        self.base_dir = os.path.abspath(base_dir)

    def fetch(self, path: str) -> FetchResponse:
        full = os.path.abspath(os.path.join(self.base_dir, path.lstrip("/")))
        if os.path.commonpath([full, self.base_dir]) != self.base_dir or not os.path.isfile(full):
            return FetchResponse(ok=False, status=404)
        with open(full, 'r', encoding='utf-8') as f:
            return FetchResponse(ok=True, status=200, text=f.read())


class HttpAssetSource:
    """Fetches asset paths relative to a base URL.

    Network errors propagate as `requests.RequestException`.
    """

    def __init__(self, base_url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, path: str) -> FetchResponse:
        url = f"{self.base_url}/{path.lstrip('/')}"
        resp = self.session.get(url, timeout=self.timeout)
        if not resp.ok:
            logger.warning(f"GET {url} -> {resp.status_code}")
        return FetchResponse(ok=resp.ok, status=resp.status_code, text=resp.text if resp.ok else "")
