import pytest

from elysp.builtin import make_root_env
from elysp.evaluation.evaluator import evaluate
from elysp.interpreter import Interpreter
from elysp.reader.parser import Reader
from elysp.types.nil import Nil
from elysp.types.symbol import SymbolTable


@pytest.fixture
def symbols():
    """A fresh symbol table for each test."""
    return SymbolTable()


@pytest.fixture
def sym(symbols):
    """Intern a name in the test's symbol table."""
    return symbols.intern


@pytest.fixture
def env(symbols):
    """Root environment with the primitive library, no prelude."""
    return make_root_env(symbols)


@pytest.fixture
def read(symbols):
    """Read the first form of a source string."""
    return lambda source: Reader(source, symbols).read()


@pytest.fixture
def run(env):
    """Read and evaluate every form in a source string; return the last value."""
    def _run(source):
        result = Nil
        for form in Reader(source, env.symbols).read_all():
            result = evaluate(env, form)
        return result
    return _run


@pytest.fixture
def interp():
    """Interpreter with the bundled prelude loaded."""
    return Interpreter()
