import pytest

from minilisp.reader.parser import Reader, parse, parse_all
from minilisp.types.errors import MiniLispParseError
from minilisp.types.symbol import Symbol
from minilisp.types.value import List, Number, to_source


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("-0", 0),
        ("  \t\n 7", 7),
    ]
)
def test_numbers(read, source, expected):
    assert read(source) == Number(expected)


@pytest.mark.parametrize("source", ["-", "abc", "x1", "1x", "--1", "-a", "+", "<=", "1-"])
def test_symbols(read, symbols, source):
    result = read(source)
    assert isinstance(result, Symbol)
    assert result is symbols.intern(source)


def test_list(read, symbols):
    result = read("(a 1 b)")
    assert result == List((symbols.intern("a"), Number(1), symbols.intern("b")))


def test_empty_list(read):
    assert read("()") == List(())


def test_nested_lists(read, symbols):
    result = read("((a b) (c (1 2)))")
    a, b, c = (symbols.intern(n) for n in "abc")
    assert result == List((List((a, b)), List((c, List((Number(1), Number(2)))))))


def test_quote_sugar(read, symbols):
    assert read("'a") == List((symbols.intern("quote"), symbols.intern("a")))
    assert read("'(1 2)") == List((symbols.intern("quote"), List((Number(1), Number(2)))))


def test_nested_quote_sugar(read):
    assert to_source(read("''x")) == "(quote (quote x))"


def test_atoms_stop_at_delimiters(read):
    assert to_source(read("(a(b)c)")) == "(a (b) c)"
    assert to_source(read("(x'y)")) == "(x (quote y))"


def test_whitespace_variants(read):
    assert to_source(read("(\n+\t1\n  2 )")) == "(+ 1 2)"


def test_same_symbol_text_yields_same_handle(read):
    result = read("(foo foo)")
    assert result[0] is result[1]


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "Unexpected end of input"),
        ("   \n", "Unexpected end of input"),
        ("(1 2", "Unterminated list"),
        ("((1) (2)", "Unterminated list"),
        (")", "Empty atom"),
        ("'", "Unexpected end of input"),
        ("(')", "Empty atom"),
    ]
)
def test_parse_errors(read, source, message):
    with pytest.raises(MiniLispParseError, match=message):
        read(source)


def test_rejected_parse_may_leave_interned_symbols(read, symbols):
    with pytest.raises(MiniLispParseError):
        read("(stray")
    assert "stray" in symbols


def test_reader_advances_cursor(symbols):
    reader = Reader("(+ 1 2) foo 3", symbols)
    assert to_source(reader.parse_expr()) == "(+ 1 2)"
    assert reader.pos == 7
    assert reader.parse_expr() is symbols.intern("foo")
    assert reader.parse_expr() == Number(3)
    assert reader.at_end()


def test_parse_reads_only_first_form(symbols):
    assert parse("1 2 3", symbols) == Number(1)


def test_parse_all(symbols):
    forms = parse_all(" (a) 2\n'b ", symbols)
    assert [to_source(f) for f in forms] == ["(a)", "2", "(quote b)"]
    assert parse_all("  ", symbols) == []
