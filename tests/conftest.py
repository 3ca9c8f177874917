from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, List

import pytest

from bella.runtime import RunOptions


@dataclass
class PrintedLines:
    """Collects print output so a test can inspect what ran before a failure."""

    lines: List[str] = field(default_factory=list)

    def options(self, **kwargs) -> RunOptions:
        return RunOptions(write=self.lines.append, **kwargs)


@pytest.fixture
def printed() -> PrintedLines:
    return PrintedLines()


@pytest.fixture(autouse=True)
def recursion_limit_restored() -> Iterator[None]:
    """Every run must hand the host recursion limit back unchanged."""
    before = sys.getrecursionlimit()
    yield
    assert sys.getrecursionlimit() == before
