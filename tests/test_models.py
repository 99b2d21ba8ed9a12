import pytest

from candidoku import CandidateSet, DIGITS


def test_singleton_is_locked():
    s = CandidateSet.of(7)
    assert s.is_locked
    assert s.value == 7
    assert len(s) == 1
    assert 7 in s


def test_from_digits_iterates_ascending():
    s = CandidateSet.from_digits([9, 2, 5])
    assert list(s) == [2, 5, 9]
    assert s.sorted_values() == (2, 5, 9)
    assert not s.is_locked


def test_equality_by_content():
    assert CandidateSet.from_digits({1, 2}) == CandidateSet.from_digits([2, 1])
    assert hash(CandidateSet.of(3)) == hash(CandidateSet.from_digits([3]))
    assert CandidateSet.of(3) != CandidateSet.of(4)


def test_empty_set_rejected():
    with pytest.raises(ValueError):
        CandidateSet.from_digits([])


@pytest.mark.parametrize("digit", [0, 10, -1])
def test_out_of_range_digit_rejected(digit):
    with pytest.raises(ValueError):
        CandidateSet.of(digit)


def test_value_of_ambiguous_set_raises():
    with pytest.raises(ValueError):
        CandidateSet.from_digits(DIGITS).value


def test_str_lists_digits():
    assert str(CandidateSet.from_digits([3, 1])) == "[1, 3]"
