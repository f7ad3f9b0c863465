import pytest

from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispTypeError, MiniLispUnboundVariable
from minilisp.types.value import Number


def test_define_and_lookup(env, symbols):
    x = symbols.intern("x")
    env.define(x, Number(1))
    assert env.lookup(x) == Number(1)
    assert env.is_bound(x)
    assert len(env) == 1


def test_lookup_unbound(env, symbols):
    with pytest.raises(MiniLispUnboundVariable):
        env.lookup(symbols.intern("missing"))


def test_newest_binding_shadows(env, symbols):
    x = symbols.intern("x")
    env.define(x, Number(1))
    env.define(x, Number(2))
    assert env.lookup(x) == Number(2)
    # both bindings are kept
    assert len(env) == 2


def test_extend_copies_without_touching_parent(env, symbols):
    x, y = symbols.intern("x"), symbols.intern("y")
    env.define(x, Number(1))
    child = env.extend([x, y], [Number(10), Number(20)])
    assert child.lookup(x) == Number(10)
    assert child.lookup(y) == Number(20)
    assert env.lookup(x) == Number(1)
    assert not env.is_bound(y)
    assert child.functions is env.functions


def test_copy_is_independent(env, symbols):
    x = symbols.intern("x")
    copy = env.copy()
    copy.define(x, Number(5))
    assert not env.is_bound(x)


def test_clear(env, symbols):
    env.define(symbols.intern("x"), Number(1))
    env.clear()
    assert len(env) == 0


def test_define_requires_symbol(env):
    with pytest.raises(MiniLispTypeError):
        env.define("x", Number(1))


def test_str(functions, symbols):
    env = Environment(functions, [(symbols.intern("a"), Number(1))])
    assert str(env) == "{a: 1}"
    assert "functions=0" in repr(env)
