import pytest

from utilkit import arrutil
from utilkit.arrutil import InvalidTypeError, Ints, Strings


def test_reverse():
    ss = ["a", "b", "c"]
    arrutil.reverse(ss)
    assert ss == ["c", "b", "a"]


def test_strings_remove():
    ns = arrutil.strings_remove(["a", "b", "c"], "b")
    assert "a" in ns
    assert "b" not in ns
    assert len(ns) == 2


def test_trim_strings():
    assert arrutil.trim_strings([" a", "b ", " c "]) == ["a", "b", "c"]
    assert arrutil.trim_strings([",a", "b.", ",.c,"], ",.") == ["a", "b", "c"]
    assert arrutil.trim_strings([",a", "b.", ",.c,"], ",", ".") == ["a", "b", "c"]


@pytest.mark.parametrize(
    "seq",
    [
        [1, 2, 3, 4, 5, 6],
        (1, 2, 3, 4, 5, 6),
        ["aa", "bb", "cc", "dd"],
        ("aa", "bb", "cc", "dd"),
        b"abcdefg",
    ],
)
def test_get_random_one(seq):
    first = arrutil.get_random_one(seq)
    second = arrutil.get_random_one(seq)
    while first == second:
        second = arrutil.get_random_one(seq)
    assert first != second
    assert arrutil.has_value(seq, first)
    assert arrutil.contains(seq, second)


def test_get_random_one_non_sequence():
    assert arrutil.get_random_one(404) == 404
    assert arrutil.get_random_one(3.14) == 3.14


def test_ints_has():
    ints = [2, 4, 5]
    assert arrutil.ints_has(ints, 2)
    assert arrutil.ints_has(ints, 5)
    assert not arrutil.ints_has(ints, 3)


def test_strings_has():
    ss = ["a", "b"]
    assert arrutil.strings_has(ss, "a")
    assert arrutil.strings_has(ss, "b")
    assert arrutil.in_strings("b", ss)
    assert not arrutil.strings_has(ss, "c")
    assert not arrutil.in_strings("c", ss)


@pytest.mark.parametrize(
    "val, seq",
    [
        (1, [1, 2, 3]),
        (4, [4, 2, 3]),
        (5, [5, 2, 3]),
        (10, [10, 3]),
        (11, ["11", "3"]),
        (ord("a"), [97]),
        (ord("b"), [ord("a"), ord("b")]),
        (ord("c"), b"abc"),
        ("a", ["a", "b", "c"]),
        (12, (12, 1, 2, 3, 4)),
        (ord("A"), (65, 66, 67)),
        (ord("d"), bytearray(b"abcd")),
        ("aa", ("aa", "bb", "cc")),
    ],
)
def test_contains(val, seq):
    assert arrutil.contains(seq, val)
    assert not arrutil.not_contains(seq, val)


@pytest.mark.parametrize(
    "arr, val",
    [
        (None, []),
        (ord("a"), []),
        ([2, 3], [2]),
        ([2, 3], "a"),
        (["a", "b"], 12),
        (None, 12),
        ({2: 3}, 12),
    ],
)
def test_contains_false(arr, val):
    assert arrutil.contains(arr, val) is False


@pytest.mark.parametrize("val, seq", [(2, [1, 3]), ("a", ["b", "c"])])
def test_not_contains(val, seq):
    assert arrutil.not_contains(seq, val)
    assert not arrutil.contains(seq, val)


def test_contains_mixed_sequence_folds_case():
    assert arrutil.contains(["A", 1], "a")
    assert not arrutil.contains(["A", "b"], "a")


def test_to_int64s():
    assert arrutil.to_int64s(["1", "2"]) == [1, 2]
    assert arrutil.must_to_int64s(["1", "2"]) == [1, 2]
    assert arrutil.must_to_int64s(("1", 2)) == [1, 2]
    assert arrutil.slice_to_int64s(["1", "2"]) == [1, 2]
    with pytest.raises(ValueError):
        arrutil.to_int64s(["a", "b"])


def test_to_int64s_invalid_type():
    with pytest.raises(InvalidTypeError):
        arrutil.to_int64s("12")
    assert arrutil.must_to_int64s({1: 2}) == []


def test_to_strings():
    assert arrutil.to_strings([1, 2]) == ["1", "2"]
    assert arrutil.must_to_strings([1, 2]) == ["1", "2"]
    assert arrutil.slice_to_strings([1, 2]) == ["1", "2"]
    assert arrutil.strings_to_slice(["1", "2"]) == ["1", "2"]
    with pytest.raises(InvalidTypeError):
        arrutil.to_strings("b")
    with pytest.raises(TypeError):
        arrutil.to_strings([[1], None])


def test_to_strings_formats_scalars():
    assert arrutil.to_strings([True, 1.5, 2.0]) == ["true", "1.5", "2"]


def test_strings_join():
    assert arrutil.join_strings(",", *["a", "b"]) == "a,b"
    assert arrutil.strings_join(",", *["a", "b"]) == "a,b"
    assert arrutil.strings_join(",", "a", "b") == "a,b"


def test_slice_to_string():
    assert arrutil.slice_to_string(None) == "[]"
    assert arrutil.slice_to_string("a", "b") == "[a,b]"
    assert arrutil.to_string(None) == "[]"


def test_strings_to_ints():
    assert arrutil.strings_to_ints(["1", "2"]) == [1, 2]
    with pytest.raises(ValueError):
        arrutil.strings_to_ints(["a", "b"])


def test_join_slice():
    assert arrutil.join_slice(",") == ""
    assert arrutil.join_slice(",", None) == ""
    assert arrutil.join_slice(",", "a", 23, "b") == "a,23,b"


def test_ints_has_and_str():
    ints = Ints([12, 23])
    assert ints.has(12)
    assert not ints.has(13)
    assert str(ints) == "12,23"


def test_strings_has_and_str():
    ss = Strings(["a", "b"])
    assert ss.has("a")
    assert not ss.has("c")
    assert str(ss) == "a,b"