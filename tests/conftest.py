import logging
from typing import Iterable, List

import pytest

from shape_sampler.sources.numpy_source import NumpyUniformSource


class ScriptedSource:
    """Uniform source replaying a fixed list of draws and recording consumption."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values: List[float] = list(values)
        self.calls = 0

    def next_uniform(self) -> float:
        value = self._values[self.calls]
        self.calls += 1
        return value


class ConstantSource:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def next_uniform(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def source() -> NumpyUniformSource:
    return NumpyUniformSource(seed=20240611)


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def constant():
    return ConstantSource


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
