import pytest

from minilisp.interpreter import Interpreter
from minilisp.reader.parser import parse
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.symbol import SymbolTable


@pytest.fixture
def symbols():
    """Fresh symbol table for each test."""
    return SymbolTable()


@pytest.fixture
def functions():
    return FunctionStore()


@pytest.fixture
def env(functions):
    """Empty environment over a fresh function store."""
    return Environment(functions)


@pytest.fixture
def read(symbols):
    """Parse one form using the test's symbol table."""
    return lambda source: parse(source, symbols)


@pytest.fixture
def interp(symbols, functions):
    return Interpreter(symbols, functions)
