import logging
import time
from urllib.parse import urlencode

import streamlit as st

from domain.constants import NAV_LINKS, NAV_PREFIX
from routing import AppContext, Location, initialize_router
from routing.assets import HttpAssetSource, LocalAssetSource
from services.api import ApiClient
from services.storage import TokenStore
from ui.components import inject_base_css, inject_view_css, render_markup, render_view_links
from utils.config import load_settings

logger = logging.getLogger(__name__)

CONTEXT_KEY = "lumo_context"
VIEW_PARAM = "view"


def location_from_query_params(params) -> Location:
    """`?view=login&token=abc` -> hash `#/login`, search `?token=abc`."""
    view = params.get(VIEW_PARAM)
    rest = {k: params.get(k) for k in params.keys() if k != VIEW_PARAM}
    search = f"?{urlencode(rest)}" if rest else ""
    return Location(hash=f"{NAV_PREFIX}{view}" if view else "", pathname="/", search=search)


def sync_query_params(location: Location):
    """Write the current hash back to the URL so reloads land on the same view."""
    if location.hash.startswith(NAV_PREFIX):
        view = location.hash[len(NAV_PREFIX):].split("?", 1)[0]
        if st.query_params.get(VIEW_PARAM) != view:
            st.query_params[VIEW_PARAM] = view


def build_context() -> AppContext:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if settings.asset_base_url:
        assets = HttpAssetSource(settings.asset_base_url, timeout=settings.request_timeout)
    else:
        assets = LocalAssetSource(settings.asset_dir)
    storage = TokenStore(st.session_state)
    api = ApiClient(settings.api_base_url, token_store=storage,
                    timeout=settings.request_timeout, profile_path=settings.profile_path)
    ctx = AppContext(location_from_query_params(st.query_params), assets, api=api, storage=storage)
    logger.info(f"New session; api={settings.api_base_url} assets={settings.asset_base_url or settings.asset_dir}")
    return ctx


def get_context() -> AppContext:
    if CONTEXT_KEY not in st.session_state:
        ctx = build_context()
        st.session_state[CONTEXT_KEY] = ctx
        initialize_router(ctx)
    return st.session_state[CONTEXT_KEY]


def render_sidebar(ctx: AppContext):
    st.sidebar.title("Navigation")
    for label, target in NAV_LINKS:
        current = ctx.route_state and target == f"{NAV_PREFIX}{ctx.route_state}"
        if st.sidebar.button(label, key=f"nav_{target}", type="primary" if current else "secondary",
                             use_container_width=True):
            ctx.navigate(target)
            st.rerun()
    st.sidebar.markdown("---")
    st.sidebar.caption("Signed in" if ctx.storage.get() else "Not signed in")


def main():
    """
    Main application shell.

    One AppContext per browser session holds the location, the rendered view
    and its behaviours. Each script run fires due deferred actions, draws the
    sidebar, the managed stylesheet, the root markup and every behaviour the
    current view mounted, then waits for the next pending deferred action.
    """
    st.set_page_config(page_title="Lumo", layout="centered")
    inject_base_css()

    ctx = get_context()
    ctx.scheduler.run_due()

    render_sidebar(ctx)

    link = ctx.document.get_element_by_id("view-css")
    if link is not None and link.href:
        inject_view_css(link.href, ctx.assets)

    render_markup(ctx.root.display_markup())
    scope = ctx.root.scope
    target = render_view_links(ctx.root.view_links(), scope.key if scope else "root")
    if target:
        ctx.navigate(target)
        st.rerun()
    if scope is not None:
        for behavior in list(scope.behaviors):
            behavior.render()

    sync_query_params(ctx.location)

    # --- Deferred actions (post-submit redirects) ---
    delay = ctx.scheduler.next_delay()
    if delay is not None:
        time.sleep(delay)
        ctx.scheduler.run_due()
        st.rerun()


if __name__ == "__main__":
    main()
