"""Explicit application state for the routing engine.

The browser globals the engine depends on (the location, the document head,
the application root) are modelled here as plain objects and bundled into
an `AppContext`. The Streamlit shell keeps one context per session; tests
build their own.
"""
from __future__ import annotations
import itertools
import logging
import time
from typing import Any, Callable, List, Optional, Tuple
from urllib.parse import parse_qs

from bs4 import BeautifulSoup

from domain.constants import NAV_PREFIX
from domain.models import LinkElement
from routing.assets import AssetResolver
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)


# -------------------- location --------------------
class Location:
    """Current location: hash, pathname and search string.

    `assign()` is the only way to navigate; every call notifies the
    hash-change listeners, even when the hash is unchanged.
    """

    def __init__(self, hash: str = "", pathname: str = "/", search: str = ""):
        self.hash = hash
        self.pathname = pathname
        self.search = search
        self._listeners: List[Callable[[], Any]] = []

    def add_listener(self, listener: Callable[[], Any]):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def assign(self, hash: str):
        self.hash = hash
        for listener in list(self._listeners):
            listener()

    def query_param(self, name: str) -> Optional[str]:
        """Look a parameter up in the hash's query part first, then the search string."""
        sources = []
        if "?" in self.hash:
            sources.append(self.hash.split("?", 1)[1])
        sources.append(self.search.lstrip("?"))
        for qs in sources:
            values = parse_qs(qs).get(name)
            if values and values[0]:
                return values[0]
        return None


# -------------------- deferred actions --------------------
class DeferredAction:
    def __init__(self, due_at: float, callback: Callable[[], Any], seq: int):
        self.due_at = due_at
        self.callback = callback
        self.seq = seq
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class Scheduler:
    """Timer queue driven by the caller (`run_due`), with an injectable clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._actions: List[DeferredAction] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> DeferredAction:
        action = DeferredAction(self._clock() + max(delay, 0.0), callback, next(self._seq))
        self._actions.append(action)
        return action

    def pending(self) -> List[DeferredAction]:
        self._actions = [a for a in self._actions if a.pending]
        return sorted(self._actions, key=lambda a: (a.due_at, a.seq))

    def next_delay(self) -> Optional[float]:
        pending = self.pending()
        if not pending:
            return None
        return max(0.0, pending[0].due_at - self._clock())

    def run_due(self) -> int:
        """Fire every action whose time has come, earliest first. Returns how many fired."""
        fired = 0
        while True:
            now = self._clock()
            due = [a for a in self.pending() if a.due_at <= now]
            if not due:
                return fired
            action = due[0]
            action.fired = True
            fired += 1
            action.callback()


# -------------------- view lifecycle --------------------
class ReadySignal:
    """Fires once, after a view's markup and stylesheet are in place."""

    def __init__(self):
        self.fired = False
        self._callbacks: List[Callable[[], Any]] = []

    def when_ready(self, callback: Callable[[], Any]):
        if self.fired:
            callback()
        else:
            self._callbacks.append(callback)

    def fire(self):
        if self.fired:
            return
        self.fired = True
        callbacks, self._callbacks = self._callbacks, []
        for cb in callbacks:
            cb()


class ViewScope:
    """One view activation: its behaviours and deferred actions.

    Closing the scope cancels whatever it still has pending and disposes the
    behaviours, so nothing from a previous view outlives a swap.
    """

    def __init__(self, name: str, scheduler: Scheduler):
        self.name = name
        self.key = create_id_with_prefix("view")
        self.ready = ReadySignal()
        self.behaviors: List[Any] = []
        self.closed = False
        self._scheduler = scheduler
        self._deferred: List[DeferredAction] = []

    def mount(self, behavior):
        self.behaviors.append(behavior)
        return behavior

    def defer(self, delay: float, callback: Callable[[], Any]) -> Optional[DeferredAction]:
        if self.closed:
            return None
        action = self._scheduler.call_later(delay, callback)
        self._deferred.append(action)
        return action

    def close(self):
        if self.closed:
            return
        self.closed = True
        for action in self._deferred:
            if action.pending:
                logger.debug(f"Cancelling deferred action of view {self.name}")
            action.cancel()
        for behavior in self.behaviors:
            dispose = getattr(behavior, "dispose", None)
            if dispose:
                dispose()
        self._deferred = []
        self.behaviors = []


class AppRoot:
    """The application root element; owns the current view's markup and scope."""

    def __init__(self, scheduler: Scheduler):
        self._scheduler = scheduler
        self._soup = BeautifulSoup("", "html.parser")
        self.scope: Optional[ViewScope] = None
        self.error: Optional[str] = None

    @property
    def markup(self) -> str:
        return str(self._soup)

    def is_empty(self) -> bool:
        return not self.markup.strip()

    def replace(self, name: str, html: str) -> ViewScope:
        self._teardown()
        self._soup = BeautifulSoup(html, "html.parser")
        self.error = None
        self.scope = ViewScope(name, self._scheduler)
        return self.scope

    def show_error(self, message: str):
        self._teardown()
        self._soup = BeautifulSoup("", "html.parser")
        p = self._soup.new_tag("p", attrs={"class": "view-error", "style": "color:#ffb4b4"})
        p.string = message
        self._soup.append(p)
        self.error = message

    def _teardown(self):
        if self.scope is not None:
            self.scope.close()
            self.scope = None

    def get_element_by_id(self, element_id: str):
        return self._soup.find(id=element_id)

    def select_one(self, selector: str):
        return self._soup.select_one(selector)

    def new_tag(self, name: str, attrs: Optional[dict] = None):
        return self._soup.new_tag(name, attrs=attrs or {})

    def view_links(self) -> List[Tuple[str, str]]:
        """(label, hash) for every in-app `#/...` anchor, in document order."""
        return [(a.get_text(" ", strip=True), a["href"])
                for a in self._soup.select(f'a[href^="{NAV_PREFIX}"]')]

    def display_markup(self) -> str:
        """Markup with in-app anchors unwrapped to text; the shell draws them as buttons."""
        soup = BeautifulSoup(self.markup, "html.parser")
        for a in soup.select(f'a[href^="{NAV_PREFIX}"]'):
            a.unwrap()
        return str(soup)


class Document:
    """The document head, reduced to the link elements the client manages."""

    def __init__(self):
        self.head: List[LinkElement] = []

    def get_element_by_id(self, element_id: str) -> Optional[LinkElement]:
        return next((el for el in self.head if el.id == element_id), None)

    def append_to_head(self, element: LinkElement):
        self.head.append(element)


class AppContext:
    def __init__(self, location: Location, assets, resolver=None, api=None, storage=None,
                 scheduler: Optional[Scheduler] = None, document: Optional[Document] = None):
        self.location = location
        self.assets = assets
        self.resolver = resolver or AssetResolver()
        self.api = api
        self.storage = storage
        self.scheduler = scheduler or Scheduler()
        self.document = document or Document()
        self.root = AppRoot(self.scheduler)
        self.route_state: Optional[str] = None
        self.router = None

    def navigate(self, hash: str):
        self.location.assign(hash)
