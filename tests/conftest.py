import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth.dungeon import Dungeon, DungeonConfig  # noqa: E402


class FirstChoiceRandom(random.Random):
    """Rng that always picks the first candidate and never draws above zero."""

    def random(self):
        return 0.0

    def choice(self, seq):
        return seq[0]


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "warn")
    for key in [k for k in os.environ if k.startswith("DUNGEON_")]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRandom()


@pytest.fixture
def small_config():
    return DungeonConfig(rows=31, cols=41, room_placement_attempts=30, seed=12345)


@pytest.fixture
def make_dungeon(small_config):
    def _make(seed=None, **overrides):
        cfg = small_config.replace(**overrides)
        if seed is not None:
            cfg = cfg.replace(seed=seed)
        return Dungeon(cfg).generate()

    return _make
