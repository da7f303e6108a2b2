"""Hash-based router.

Maps the location to one of the known views and reloads it on every
hash-change event. Load failures are rendered inline; they never escape.
"""
import logging
from typing import Mapping, Optional

from domain.constants import DEFAULT_VIEW, NAV_PREFIX, ROUTE_ALIASES, VIEW_LOAD_ERROR, VIEW_NAMES
from routing.loader import ViewEntry, ViewLoader

logger = logging.getLogger(__name__)


def resolve_route(location) -> str:
    """Return the view name for a location.

    `#/<path>` uses the hash; any other hash falls back to the pathname
    (legacy links such as `/reset-password?token=...`). Query strings and a
    trailing slash are ignored, aliases applied, unknown paths -> home.
    """
    if location.hash.startswith(NAV_PREFIX):
        path = location.hash[len(NAV_PREFIX):]
    else:
        path = (location.pathname or "").lstrip("/")
    path = path.split("?", 1)[0].rstrip("/")
    path = ROUTE_ALIASES.get(path, path)
    return path if path in VIEW_NAMES else DEFAULT_VIEW


class Router:
    def __init__(self, ctx, initializers: Mapping[str, Optional[ViewEntry]]):
        self.ctx = ctx
        self.loader = ViewLoader(ctx, initializers)
        self._installed = False

    def initialize(self):
        """Listen for hash changes and render the current route once."""
        if self._installed:
            return
        self._installed = True
        self.ctx.location.add_listener(self.handle_route)
        self.handle_route()

    def handle_route(self):
        route = resolve_route(self.ctx.location)
        self.ctx.route_state = route
        try:
            self.loader.load(route)
        except Exception:
            logger.exception(f"Could not load view {route!r}")
            self.ctx.root.show_error(VIEW_LOAD_ERROR)


def initialize_router(ctx, initializers=None) -> Router:
    """Install a router on the context (once) and perform the first render."""
    if ctx.router is None:
        if initializers is None:
            from views import VIEW_INITIALIZERS
            initializers = VIEW_INITIALIZERS
        ctx.router = Router(ctx, initializers)
    ctx.router.initialize()
    return ctx.router
