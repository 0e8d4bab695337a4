import pytest

from scanner.accumulator import MatchAccumulator
from scanner.errors import ConfigurationError
from scanner.models import MatchResult


def make(full, *groups, line=0):
    return MatchResult(full_value=full, groups=(full,) + groups, line_number=line)


def test_append_mode_keeps_duplicates_in_order():
    acc = MatchAccumulator()
    acc.add([make("a"), make("b")])
    acc.add([make("a")])

    assert not acc.unique
    assert [m.full_value for m in acc.results()] == ["a", "b", "a"]
    assert len(acc) == 3


def test_unique_mode_first_seen_wins():
    acc = MatchAccumulator(unique_group=1)
    acc.add([make("ip=1 ok", "1", line=1), make("ip=1 dup", "1", line=2)])
    acc.add([make("ip=2 ok", "2", line=3)])

    results = acc.results()
    assert [m.groups[1] for m in results] == ["1", "2"]
    assert results[0].full_value == "ip=1 ok"
    assert results[0].line_number == 1


def test_unique_mode_same_full_text_different_key_is_kept():
    acc = MatchAccumulator(unique_group=2)
    acc.add([make("x", "same", "k1"), make("x", "same", "k2")])
    assert len(acc) == 2


def test_unique_mode_missing_group_is_its_own_key():
    acc = MatchAccumulator(unique_group=1)
    acc.add([make("a", None), make("b", ""), make("c", None), make("d", "")])

    assert [m.full_value for m in acc.results()] == ["a", "b"]


def test_group_zero_uses_whole_match():
    acc = MatchAccumulator(unique_group=0)
    acc.add([make("foo"), make("bar"), make("foo")])
    assert [m.full_value for m in acc.results()] == ["foo", "bar"]


@pytest.mark.parametrize("bad", [-1, -5, "1", 1.0, True])
def test_invalid_group_index_rejected(bad):
    with pytest.raises(ConfigurationError):
        MatchAccumulator(unique_group=bad)


def test_group_missing_from_match_raises():
    acc = MatchAccumulator(unique_group=3)
    with pytest.raises(ConfigurationError):
        acc.add([make("a", "b")])


def test_results_returns_a_copy():
    acc = MatchAccumulator()
    acc.add([make("a")])
    snapshot = acc.results()
    snapshot.append(make("b"))
    assert len(acc.results()) == 1
