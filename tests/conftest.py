import pytest
from unittest.mock import MagicMock

from domain.models import FetchResponse
from routing import AppContext, Location, Scheduler
from routing.assets import LocalAssetSource
from services.storage import TokenStore
from utils.paths import resolve_asset_dir


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class DictAssetSource:
    """Serves fragments from a dict and remembers every path requested."""

    def __init__(self, files):
        self.files = dict(files)
        self.requests = []

    def fetch(self, path):
        self.requests.append(path)
        if path in self.files:
            return FetchResponse(ok=True, status=200, text=self.files[path])
        return FetchResponse(ok=False, status=404)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def api():
    return MagicMock()


@pytest.fixture
def make_ctx(clock, api):
    def _make(hash="", pathname="/", search="", assets=None):
        return AppContext(
            Location(hash=hash, pathname=pathname, search=search),
            assets or LocalAssetSource(resolve_asset_dir()),
            api=api,
            storage=TokenStore({}),
            scheduler=Scheduler(clock=clock),
        )
    return _make


@pytest.fixture
def run_for(clock):
    """Advance the fake clock and fire whatever became due."""
    def _run(ctx, seconds):
        clock.advance(seconds)
        return ctx.scheduler.run_due()
    return _run


@pytest.fixture
def assets_for():
    """Minimal fragments for the given view names, served from memory."""
    def _make(*names):
        return DictAssetSource({f"views/{n}.html": f"<section id='{n}'><h2>{n}</h2></section>" for n in names})
    return _make
