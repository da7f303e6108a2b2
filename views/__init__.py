"""View behaviour modules.

Every view fragment under `assets/views/` may have a behaviour module here
exposing `init(ctx, scope)`. The initializer looks up its anchor elements in
the freshly inserted markup, mounts a behaviour object on the view scope and
returns; the Streamlit shell calls each mounted behaviour's `render()` on
every run.

Register new views in `VIEW_INITIALIZERS`. It lists every known view name;
markup-only views map to None.
"""
from routing.loader import ViewEntry

from . import board, dashboard, login, password_recovery, profile, register

VIEW_INITIALIZERS = {
    "home": None,
    "login": ViewEntry(login.init),
    "register": ViewEntry(register.init),
    # form elements must be in place before the token is read
    "password-recovery": ViewEntry(password_recovery.init, defer_until_ready=True),
    "dashboard": ViewEntry(dashboard.init),
    "profile": ViewEntry(profile.init),
    "all": None,
    # resolved to password-recovery by the router; never loaded directly
    "reset-password": None,
    "board": ViewEntry(board.init),
}
