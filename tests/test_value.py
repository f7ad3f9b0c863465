from minilisp.types.value import List, Number, result_number, to_source


def test_result_number(symbols):
    assert result_number(Number(7)) == 7
    assert result_number(Number(0)) == 0
    assert result_number(symbols.intern("square")) == 0
    assert result_number(List((Number(1),))) == 0


def test_to_source(read):
    assert to_source(read("(a (b 1) () -2)")) == "(a (b 1) () -2)"
    assert str(read("(1 2)")) == "(1 2)"
    assert str(Number(-4)) == "-4"


def test_structural_equality(read):
    assert read("(1 (2 3))") == read("(1 (2 3))")
    assert read("(1 2)") != read("(1 3)")
    assert Number(1) != List((Number(1),))


def test_slicing_a_list_gives_a_list(read):
    lst = read("(1 2 3)")
    assert lst[1:] == List((Number(2), Number(3)))
    assert isinstance(lst[:0], List)
    assert lst[0] == Number(1)
