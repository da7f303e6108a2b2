"""View routing and lifecycle engine.

- `context`: explicit location, document, application root and scheduler.
- `assets`: name -> fragment/stylesheet path, and the sources that fetch them.
- `styles`: the single managed view stylesheet.
- `loader`: fetch, swap markup and stylesheet, dispatch to the initializer.
- `router`: hash -> view resolution and the hash-change handler.
"""

from .context import AppContext, Location, Scheduler, ViewScope
from .loader import LoadError, ViewEntry, ViewLoader
from .router import Router, initialize_router, resolve_route
