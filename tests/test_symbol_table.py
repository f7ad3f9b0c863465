from hypothesis import given, strategies as st

from minilisp.types.symbol import Symbol, SymbolTable

names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz+-*/<>=!?", min_size=1, max_size=12)


def test_intern_same_text_returns_same_handle(symbols):
    a = symbols.intern("foo")
    b = symbols.intern("foo")
    assert a is b
    assert a == b
    assert symbols.size() == 1


def test_intern_different_text_returns_different_handles(symbols):
    a = symbols.intern("foo")
    b = symbols.intern("bar")
    assert a != b
    assert len(symbols) == 2


def test_handles_survive_many_later_inserts(symbols):
    first = symbols.intern("first")
    for i in range(5000):
        symbols.intern(f"sym{i}")
    assert symbols.intern("first") is first
    assert first.name == "first"


def test_clear_invalidates_old_handles(symbols):
    before = symbols.intern("x")
    symbols.clear()
    assert symbols.size() == 0
    assert "x" not in symbols
    after = symbols.intern("x")
    assert after != before
    assert after.serial != before.serial


def test_lookup_does_not_insert(symbols):
    assert symbols.lookup("nope") is None
    assert symbols.size() == 0
    sym = symbols.intern("yes")
    assert symbols.lookup("yes") is sym


def test_tables_are_independent():
    a = SymbolTable().intern("x")
    b = SymbolTable().intern("x")
    assert a != b


def test_symbol_str_and_repr(symbols):
    sym = symbols.intern("car")
    assert isinstance(sym, Symbol)
    assert str(sym) == "car"
    assert repr(sym) == "Symbol('car')"


@given(st.lists(names, min_size=1, max_size=30))
def test_interning_is_idempotent(texts):
    table = SymbolTable()
    first = [table.intern(t) for t in texts]
    second = [table.intern(t) for t in texts]
    assert first == second
    assert table.size() == len(set(texts))
