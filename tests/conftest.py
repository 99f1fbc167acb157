import pytest


class RecordingDisplay:
    """Display sink that keeps every event it receives."""

    def __init__(self):
        self.events = []
        self.on_event = None

    def _record(self, event):
        self.events.append(event)
        if self.on_event is not None:
            self.on_event(event)

    def on_interval_start(self, interval):
        self._record(("start", interval.kind))

    def on_tick(self, interval, remaining):
        self._record(("tick", interval.kind, remaining))

    def on_interval_complete(self, interval):
        self._record(("complete", interval.kind))

    def on_session_complete(self):
        self._record(("session_complete",))


@pytest.fixture
def display():
    return RecordingDisplay()
