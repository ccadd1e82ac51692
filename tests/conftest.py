"""Root conftest — shared test configuration and fake parsing capabilities."""

import os

import pytest

# Tests never depend on a developer's .env
os.environ.setdefault("PARSER_ENTRYPOINT", "todotxt.render:parse")
os.environ.setdefault("LOG_FORMAT", "text")


def upper_parse(raw: str) -> str:
    """Deterministic stand-in capability: derived text is the upper-cased input."""
    return raw.upper()


class CountingCapability:
    """Capability that records every input it receives."""

    def __init__(self, transform=upper_parse):
        self.calls: list[str] = []
        self._transform = transform

    def __call__(self, raw: str) -> str:
        self.calls.append(raw)
        return self._transform(raw)


class ExplodingCapability:
    """Capability that breaks its totality contract on a trigger substring."""

    def __init__(self, trigger: str = "boom"):
        self.trigger = trigger

    def __call__(self, raw: str) -> str:
        if self.trigger in raw:
            raise RuntimeError(f"cannot parse {self.trigger!r}")
        return raw[::-1]


@pytest.fixture
def counting_capability():
    return CountingCapability()


@pytest.fixture
def exploding_capability():
    return ExplodingCapability()


@pytest.fixture
def empty_faulting_capability():
    """Fails on every input, including the initial empty text."""
    return ExplodingCapability(trigger="")
