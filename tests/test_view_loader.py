import pytest
import requests
from unittest.mock import MagicMock

from domain.constants import VIEW_CSS_ID
from routing.loader import LoadError, ViewEntry, ViewLoader


def test_missing_view_raises_load_error(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("home"))
    loader = ViewLoader(ctx, {})
    with pytest.raises(LoadError) as exc:
        loader.load("board")
    assert exc.value.name == "board"
    assert exc.value.status == 404
    assert str(exc.value) == "Failed to load view: board"


def test_network_failure_is_wrapped(make_ctx):
    assets = MagicMock()
    assets.fetch.side_effect = requests.Timeout("slow")
    ctx = make_ctx(assets=assets)
    with pytest.raises(LoadError) as exc:
        ViewLoader(ctx, {}).load("home")
    assert isinstance(exc.value.__cause__, requests.Timeout)


def test_markup_is_replaced(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("home", "board"))
    loader = ViewLoader(ctx, {})
    loader.load("home")
    loader.load("board")
    assert ctx.root.get_element_by_id("board") is not None
    assert ctx.root.get_element_by_id("home") is None


def test_single_managed_stylesheet_follows_last_mapped_view(make_ctx):
    ctx = make_ctx()
    loader = ViewLoader(ctx, {})
    for name in ("login", "board", "profile", "home"):
        loader.load(name)
        links = [el for el in ctx.document.head if el.id == VIEW_CSS_ID]
        assert len(links) == 1
    assert ctx.document.head[0].href == "styles/home.css"
    assert ctx.document.head[0].rel == "stylesheet"


def test_auth_views_share_one_stylesheet(make_ctx):
    ctx = make_ctx()
    loader = ViewLoader(ctx, {})
    for name in ("login", "register", "password-recovery"):
        loader.load(name)
        assert ctx.document.get_element_by_id(VIEW_CSS_ID).href == "styles/auth.css"


def test_unmapped_view_keeps_previous_stylesheet(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("board", "reset-password"))
    loader = ViewLoader(ctx, {})
    loader.load("board")
    loader.load("reset-password")
    assert len(ctx.document.head) == 1
    assert ctx.document.head[0].href == "styles/board.css"


def test_stylesheet_created_lazily(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("reset-password"))
    ViewLoader(ctx, {}).load("reset-password")
    assert ctx.document.head == []


def test_dispatches_to_matching_initializer_only(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("home", "board"))
    board_init = MagicMock()
    loader = ViewLoader(ctx, {"board": ViewEntry(board_init), "home": None})
    loader.load("home")
    board_init.assert_not_called()
    scope = loader.load("board")
    board_init.assert_called_once_with(ctx, scope)


def test_deferred_initializer_waits_for_ready_signal(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("login"))
    seen = {}

    def init(c, scope):
        seen["ready"] = scope.ready.fired
        seen["markup"] = c.root.get_element_by_id("login") is not None
        seen["style"] = c.document.get_element_by_id(VIEW_CSS_ID).href

    ViewLoader(ctx, {"login": ViewEntry(init, defer_until_ready=True)}).load("login")
    assert seen == {"ready": True, "markup": True, "style": "styles/auth.css"}


def test_swapping_views_cancels_pending_actions(make_ctx, assets_for, run_for):
    ctx = make_ctx(assets=assets_for("home", "board"))
    loader = ViewLoader(ctx, {})
    scope = loader.load("board")
    fired = []
    action = scope.defer(1.0, lambda: fired.append("late"))
    loader.load("home")
    assert scope.closed
    assert action.cancelled
    assert run_for(ctx, 5) == 0
    assert fired == []


def test_swapping_views_disposes_behaviors(make_ctx, assets_for):
    ctx = make_ctx(assets=assets_for("home", "board"))
    loader = ViewLoader(ctx, {})
    scope = loader.load("board")
    behavior = scope.mount(MagicMock())
    loader.load("home")
    behavior.dispose.assert_called_once_with()
    assert ctx.root.scope is not scope
    assert ctx.root.scope.behaviors == []
