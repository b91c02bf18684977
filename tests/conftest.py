import os
import sys
import tempfile
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, lumberjack)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless / test mode environment variables
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
# Keep the shared settings file out of the working tree.
os.environ.setdefault(
    "LUMBERJACK_SETTINGS_FILE",
    os.path.join(tempfile.mkdtemp(prefix="lumberjack-tests-"), "settings.json"),
)

import pytest  # noqa: E402

from lumberjack.rng_service import RNGService  # noqa: E402
from lumberjack.world import World  # noqa: E402


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: int = 1000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return RNGService(12345)


@pytest.fixture
def world(rng, clock):
    w = World(800, 400, rng=rng, clock=clock)
    w.start()
    return w
