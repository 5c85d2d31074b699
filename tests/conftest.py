import pytest


@pytest.fixture
def headers():
    return ["key", "lon", "lat", "name"]


@pytest.fixture
def records():
    return [
        ["A", "1.0", "2.0", "first"],
        ["A", "1.1", "2.1", "second"],
        ["B", "5.0", "5.0", "third"],
    ]


class RecordingProgress:
    """progress_tick の呼び出しを記録する進捗レポーター"""

    def __init__(self, chunk=0.25):
        self.ticks = []
        self.chunk = chunk
        self.chunk_requests = []

    def progress_tick(self, amount):
        self.ticks.append(amount)

    def create_chunk(self, count):
        self.chunk_requests.append(count)
        return self.chunk


@pytest.fixture
def recording_progress():
    return RecordingProgress()
