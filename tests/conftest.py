"""
Shared fixtures: in-memory stand-ins for the host window service, the
screen geometry provider and the user notifier.
"""

import pytest

from bsptile.core.window import WindowInfo, WindowState
from bsptile.tiling.rect import Rect


class FakeWindowService:
    """Records every list/update call; serves a fixed window list."""

    def __init__(self, windows=None, fail_ids=()):
        self.windows = list(windows or [])
        self.fail_ids = set(fail_ids)
        self.list_calls = []
        self.updates = []

    async def list_windows(self, populate=False):
        self.list_calls.append(populate)
        return list(self.windows)

    async def update_window(self, window_id, geometry, state):
        self.updates.append((window_id, geometry, state))
        if window_id in self.fail_ids:
            raise RuntimeError(f"window {window_id} refused the update")


class FakeScreen:
    def __init__(self, area):
        self.area = area
        self.reads = 0

    def work_area(self):
        self.reads += 1
        return self.area


class FakeNotifier:
    def __init__(self):
        self.messages = []

    def alert(self, message):
        self.messages.append(message)


def make_window(window_id, left=10, top=10, width=300, height=200,
                state=WindowState.NORMAL):
    return WindowInfo(window_id, left, top, width, height, state)


@pytest.fixture
def work_area():
    return Rect(0, 0, 1000, 500)


@pytest.fixture
def screen(work_area):
    return FakeScreen(work_area)


@pytest.fixture
def notifier():
    return FakeNotifier()
