import io

import pytest

from calist.ctype import (
    CType,
    ctype_bool,
    ctype_char,
    ctype_double,
    ctype_float,
    ctype_int,
    ctype_long,
    ctype_size_t,
    ctype_string,
)


def _all_kinds():
    return [
        ctype_int(),
        ctype_long(),
        ctype_char(),
        ctype_bool(),
        ctype_size_t(),
        ctype_float(),
        ctype_double(),
        ctype_string(),
    ]


@pytest.mark.parametrize(
    "factory, sample, expected",
    [
        (ctype_int, 5, "5"),
        (ctype_long, -7, "-7"),
        (ctype_char, "q", "q"),
        (ctype_bool, True, "true"),
        (ctype_size_t, 12, "12"),
        (ctype_float, 0.5, "0.5"),
        (ctype_double, 2.5, "2.5"),
        (ctype_string, "hi", "hi"),
    ],
)
def test_factories_return_shared_singleton(factory, sample, expected):
    first = factory()
    second = factory()
    assert first is second
    assert first == second
    assert first.format(sample) == expected
    assert second.format(sample) == expected


def test_factories_return_distinct_types():
    kinds = [
        ctype_int(),
        ctype_long(),
        ctype_char(),
        ctype_bool(),
        ctype_size_t(),
        ctype_float(),
        ctype_double(),
        ctype_string(),
    ]
    assert len({id(kind) for kind in kinds}) == 8


def test_distinct_types_are_not_equal():
    assert ctype_int() != ctype_long()
    assert ctype_float() != ctype_double()


def test_custom_types_compare_by_identity():
    first = CType("point", 16)
    second = CType("point", 16)
    assert first == first
    assert (first == second) is False


def test_int_size_is_four_bytes():
    assert ctype_int().size == 4


def test_char_and_bool_are_one_byte():
    assert ctype_char().size == 1
    assert ctype_bool().size == 1


def test_int_dup_returns_equal_value():
    assert ctype_int().dup(5) == 5
    assert ctype_int().dup(-30) == -30


def test_int_dup_rejects_overflow():
    with pytest.raises(OverflowError):
        ctype_int().dup(2**31)
    assert ctype_int().dup(2**31 - 1) == 2**31 - 1


def test_size_t_rejects_negative():
    with pytest.raises(OverflowError):
        ctype_size_t().dup(-1)
    assert ctype_size_t().dup(0) == 0


def test_int_dup_rejects_non_integer():
    with pytest.raises(TypeError):
        ctype_int().dup("5")
    with pytest.raises(TypeError):
        ctype_int().dup(1.5)


def test_dup_rejects_none():
    with pytest.raises(ValueError):
        ctype_int().dup(None)
    with pytest.raises(ValueError):
        ctype_long().dup(None)
    with pytest.raises(ValueError):
        ctype_char().dup(None)
    with pytest.raises(ValueError):
        ctype_bool().dup(None)
    with pytest.raises(ValueError):
        ctype_size_t().dup(None)
    with pytest.raises(ValueError):
        ctype_float().dup(None)
    with pytest.raises(ValueError):
        ctype_double().dup(None)
    with pytest.raises(ValueError):
        ctype_string().dup(None)


def test_compare_rejects_none():
    samples = [
        (ctype_int(), ctype_int().dup(1)),
        (ctype_long(), ctype_long().dup(1)),
        (ctype_char(), ctype_char().dup("a")),
        (ctype_bool(), ctype_bool().dup(1)),
        (ctype_size_t(), ctype_size_t().dup(1)),
        (ctype_float(), ctype_float().dup(1)),
        (ctype_double(), ctype_double().dup(1)),
        (ctype_string(), ctype_string().dup("a")),
    ]
    for kind, sample in samples:
        with pytest.raises(ValueError):
            kind.compare(None, sample)
        with pytest.raises(ValueError):
            kind.compare(sample, None)


def test_every_kind_compares_equal_to_itself():
    samples = ["a", True, 1]
    for kind in _all_kinds():
        sample = next(
            (value for value in samples if _accepts(kind, value)), None
        )
        assert sample is not None
        copied = kind.dup(sample)
        assert kind.compare(copied, copied) == 0


def _accepts(kind, value):
    try:
        kind.dup(value)
    except (TypeError, ValueError, OverflowError):
        return False
    return True


def test_char_dup_requires_single_character():
    assert ctype_char().dup("x") == "x"
    with pytest.raises(ValueError):
        ctype_char().dup("xy")
    with pytest.raises(TypeError):
        ctype_char().dup(65)


def test_bool_dup_normalises_integers():
    assert ctype_bool().dup(1) is True
    assert ctype_bool().dup(0) is False


def test_bool_format_uses_words():
    assert ctype_bool().format(True) == "true"
    assert ctype_bool().format(False) == "false"


def test_int_format_is_decimal():
    assert ctype_int().format(20) == "20"
    assert ctype_long().format(-7) == "-7"


def test_char_and_string_format_are_raw_text():
    assert ctype_char().format("z") == "z"
    assert ctype_string().format("hello world") == "hello world"


def test_double_format_uses_general_notation():
    assert ctype_double().format(2.5) == "2.5"
    assert ctype_double().format(3.0) == "3"
    assert ctype_double().format(1e20) == "1e+20"


def test_float_dup_rounds_to_single_precision():
    rounded = ctype_float().dup(0.1)
    assert abs(rounded - 0.1) < 1e-7
    assert ctype_float().dup(rounded) == rounded
    assert ctype_float().dup(0.5) == 0.5


def test_double_dup_keeps_precision():
    assert ctype_double().dup(0.1) == 0.1
    assert ctype_double().dup(3) == 3.0


@pytest.mark.parametrize(
    "factory, small, large",
    [
        (ctype_int, 1, 2),
        (ctype_long, -5, 5),
        (ctype_size_t, 0, 10),
        (ctype_double, 1.5, 2.5),
        (ctype_float, -1.0, 0.0),
        (ctype_char, "a", "b"),
        (ctype_bool, False, True),
        (ctype_string, "apple", "banana"),
    ],
)
def test_compare_orders_values(factory, small, large):
    kind = factory()
    assert kind.compare(small, large) < 0
    assert kind.compare(large, small) > 0
    assert kind.compare(small, small) == 0


def test_string_compare_prefix_is_smaller():
    assert ctype_string().compare("ab", "abc") < 0
    assert ctype_string().compare("abc", "ab") > 0


def test_string_dup_is_equal_string():
    assert ctype_string().dup("text") == "text"
    with pytest.raises(TypeError):
        ctype_string().dup(b"text")


def test_print_writes_without_newline():
    buffer = io.StringIO()
    ctype_int().print(10, buffer)
    ctype_bool().print(True, buffer)
    assert buffer.getvalue() == "10true"


def test_print_defaults_to_stdout(capsys):
    ctype_string().print("hello")
    assert capsys.readouterr().out == "hello"


def test_custom_type_uses_given_behaviour():
    kind = CType(
        "upper",
        8,
        dup=lambda value: value.upper(),
        format=lambda value: f"<{value}>",
        compare=lambda a, b: len(a) - len(b),
    )
    assert kind.dup("abc") == "ABC"
    assert kind.format("abc") == "<abc>"
    assert kind.compare("a", "bbb") < 0
    assert kind.compare("aaa", "bbb") == 0


def test_custom_type_default_dup_is_deep_copy():
    kind = CType("list", 8)
    original = [[1, 2], [3]]
    copied = kind.dup(original)
    assert copied == original
    copied[0].append(9)
    assert original == [[1, 2], [3]]


def test_custom_type_rejects_negative_size():
    with pytest.raises(ValueError):
        CType("bad", -1)