import threading

from imagery_ui.models.result import ProcessingResult


class FakeClient:
    """Stands in for ProcessingClient; records calls and replays a canned outcome."""

    def __init__(self, outcome=None):
        self.outcome = outcome
        self.calls = []

    def process(self, youtube_url, save):
        self.calls.append({"youtube_url": youtube_url, "save": save})
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        if isinstance(self.outcome, dict):
            return ProcessingResult.model_validate(self.outcome)
        return self.outcome


class GatedClient:
    """Blocks each call until its gate is opened, so tests can order resolutions."""

    def __init__(self):
        self.gates = {}
        self.calls = []

    def gate(self, youtube_url):
        return self.gates.setdefault(youtube_url, threading.Event())

    def process(self, youtube_url, save):
        self.calls.append(youtube_url)
        self.gate(youtube_url).wait(timeout=5)
        return ProcessingResult.model_validate({"youtube_url": youtube_url, "products": []})
