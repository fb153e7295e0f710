import pytest

from diff_filters.capabilities import Fragment, Lenient, Line


def test_lenient_delegates_and_stubs(make_line):
    line = Lenient(make_line("left", "right"))
    assert line.get_left() == "left"
    assert line.get_missing("anything") is None
    assert str(Lenient(42)) == "42"


def test_lenient_is_read_only(make_line):
    with pytest.raises(AttributeError):
        Lenient(make_line()).left = "x"


def test_fakes_satisfy_protocols(make_fragment, make_line):
    assert isinstance(make_fragment(), Fragment)
    assert isinstance(make_line(), Line)
