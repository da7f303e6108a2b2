"""Fetches a view fragment, installs it in the root and starts its behaviour."""
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

import requests

from domain.constants import VIEW_STYLE_MAP
from routing.styles import StyleSwapper

logger = logging.getLogger(__name__)


class LoadError(Exception):
    def __init__(self, name: str, status: Optional[int] = None):
        super().__init__(f"Failed to load view: {name}")
        self.name = name
        self.status = status


@dataclass(frozen=True)
class ViewEntry:
    """Initializer table entry.

    `defer_until_ready` entries run off the scope's ready signal, which the
    loader fires once markup and stylesheet are both installed.
    """
    init: Callable
    defer_until_ready: bool = False


class ViewLoader:
    def __init__(self, ctx, initializers: Mapping[str, Optional[ViewEntry]]):
        self.ctx = ctx
        self.initializers = initializers
        self.styles = StyleSwapper(ctx.document)

    def load(self, name: str):
        url = self.ctx.resolver.view_url(name)
        try:
            response = self.ctx.assets.fetch(url)
        except requests.RequestException as e:
            raise LoadError(name) from e
        if not response.ok:
            raise LoadError(name, response.status)

        scope = self.ctx.root.replace(name, response.text)
        logger.info(f"Loaded view: {name}")

        css_name = VIEW_STYLE_MAP.get(name)
        if css_name:
            self.styles.set_view_stylesheet(self.ctx.resolver.style_url(css_name))

        entry = self.initializers.get(name)
        if entry is not None:
            if entry.defer_until_ready:
                scope.ready.when_ready(lambda: entry.init(self.ctx, scope))
            else:
                entry.init(self.ctx, scope)
        scope.ready.fire()
        return scope
