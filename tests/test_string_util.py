import pytest

from mphmap.string_util import debugln, format_string, infoln, to_str


def test_format():
    expected = " %% 4 foo 0x0A bar "
    foo = "foo"
    assert format_string(" %%%% %v %v 0x%.2X bar ", 4, foo, 10) == expected


def test_infoln(capsys):
    infoln("%s:%d: MY INFO LINE", "here.py", 12)
    assert capsys.readouterr().out == "here.py:12: MY INFO LINE\n"


def test_macro(capsys):
    debugln("here i am")
    err = capsys.readouterr().err
    assert err.endswith(": here i am\n")
    assert "test_string_util.py:" in err


def test_debugln_reports_calling_line(capsys):
    import inspect

    line = inspect.currentframe().f_lineno + 1
    debugln("value %v", 7)
    assert capsys.readouterr().err.endswith(f":{line}: value 7\n")


def test_missing_arguments_leave_directives():
    assert format_string("%v and %v", 1) == "1 and %v"


def test_too_many_arguments():
    with pytest.raises(ValueError):
        format_string("no directives", 1)


def test_bad_printf_conversion():
    with pytest.raises(ValueError):
        format_string("%d", "abc")


def test_escape_before_directive():
    assert format_string("100%% of %v", "keys") == "100% of keys"


def test_printf_directive_keeps_trailing_text():
    assert format_string("[%5d] done", 42) == "[   42] done"


def test_tuple_value_with_v():
    assert format_string("pair %v!", (1, "a")) == "pair (1,a)!"


def test_to_str_list():
    assert to_str([1, 2, 3]) == "[1 2 3]"
    assert to_str([]) == "[]"


def test_to_str_pair_and_nested():
    assert to_str((1, "a")) == "(1,a)"
    assert to_str([(1, 2), (3, 4)]) == "[(1,2) (3,4)]"


def test_to_str_bool_and_float():
    assert to_str(True) == "1"
    assert to_str(False) == "0"
    assert to_str(1.0) == "1"
    assert to_str(0.5) == "0.5"


def test_to_str_plain():
    assert to_str("foo") == "foo"
    assert to_str(17) == "17"