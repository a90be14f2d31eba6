import pytest

from interpreter import Interpreter
from wordstack_types import Primitive


def _plus(i):
    a, b = i.take(2)
    i.push(a + b)

def _dup(i):
    a, = i.take(1)
    i.push(a)
    i.push(a)


@pytest.fixture
def plus():
    return Primitive(_plus)

@pytest.fixture
def dup():
    return Primitive(_dup)

@pytest.fixture
def interpreter():
    return Interpreter()

@pytest.fixture
def strict_interpreter():
    return Interpreter(strict=True)
