import random
import pytest

from passdraw.random_source import RandomSource


class SequenceReader:
    """
    Byte reader that replays a fixed sequence of chunks, one per call, and
    records the requested sizes.
    """
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.requests = []

    def __call__(self, n):
        self.requests.append(n)
        return self.chunks.pop(0)


def word(*chunks):
    """64-bit big-endian word whose 7-bit chunks (lowest first) are given."""
    value = 0
    for i, c in enumerate(chunks):
        value |= c << (7*i)
    return value.to_bytes(8, "big")


@pytest.fixture
def seeded_source():
    return RandomSource(random.Random(1234).randbytes)

@pytest.fixture
def zero_source():
    return RandomSource(lambda n: bytes(n))

@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
