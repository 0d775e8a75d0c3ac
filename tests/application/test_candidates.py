"""Candidate iterator tests: double-ended walk, exact length, skip-ahead and fusing."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from config_finder import ConfigCandidates, ConfigDirs

STEPS = st.lists(st.sampled_from(["front", "back", "skip"]), max_size=12)


def _dirs(*names: str) -> ConfigDirs:
    dirs = ConfigDirs.empty()
    for name in names:
        dirs.add_path(name)
    return dirs


def test_forward_order_follows_insertion() -> None:
    cands = _dirs("p1", "p2", "p3").search("my-app", "main", "kdl")
    assert [c.path for c in cands] == [
        Path("p1/.config/my-app/main.kdl"),
        Path("p2/.config/my-app/main.kdl"),
        Path("p3/.config/my-app/main.kdl"),
    ]


def test_reverse_order() -> None:
    cands = _dirs("p1", "p2", "p3").search("my-app", "main", "kdl")
    assert [c.local_path for c in reversed(cands)] == [
        Path("p3/.config/my-app/main.local.kdl"),
        Path("p2/.config/my-app/main.local.kdl"),
        Path("p1/.config/my-app/main.local.kdl"),
    ]


def test_front_and_back_meet_in_the_middle() -> None:
    cands = _dirs("start", "second", "end").search("my-app", "main", "kdl")

    first = next(cands)
    assert first.path == Path("start/.config/my-app/main.kdl")
    assert first.local_path == Path("start/.config/my-app/main.local.kdl")

    last = cands.next_back()
    assert last is not None
    assert last.path == Path("end/.config/my-app/main.kdl")

    middle = next(cands)
    assert middle.path == Path("second/.config/my-app/main.kdl")

    assert next(cands, None) is None
    assert cands.next_back() is None


def test_empty_app_searches_base_directly() -> None:
    cands = _dirs("start").search("", "my-app", "kdl")
    item = next(cands)
    assert item.path == Path("start/.config/my-app.kdl")
    assert item.local_path == Path("start/.config/my-app.local.kdl")
    assert next(cands, None) is None


def test_empty_extension() -> None:
    item = next(_dirs("start").search("my-app", "main", ""))
    assert item.path == Path("start/.config/my-app/main")
    assert item.local_path == Path("start/.config/my-app/main.local")


def test_no_paths_yields_nothing() -> None:
    cands = ConfigDirs.empty().search("app", "main", "kdl")
    assert len(cands) == 0
    assert list(cands) == []
    assert cands.next_back() is None


def test_len_tracks_remaining() -> None:
    cands = _dirs("a", "b", "c", "d").search("app", "main", "toml")
    assert len(cands) == 4
    next(cands)
    assert len(cands) == 3
    cands.next_back()
    assert len(cands) == 2
    assert len(list(cands)) == 2
    assert len(cands) == 0


def test_nth_skips_from_front() -> None:
    cands = _dirs("a", "b", "c", "d").search("app", "main", "toml")
    item = cands.nth(2)
    assert item is not None
    assert item.path == Path("c/.config/app/main.toml")
    assert len(cands) == 1


def test_nth_past_end_exhausts() -> None:
    cands = _dirs("a", "b").search("app", "main", "toml")
    assert cands.nth(5) is None
    assert len(cands) == 0
    assert next(cands, None) is None


def test_nth_rejects_negative() -> None:
    with pytest.raises(ValueError):
        _dirs("a").search("app", "main", "toml").nth(-1)


def test_last_consumes_everything() -> None:
    cands = _dirs("a", "b", "c").search("app", "main", "toml")
    item = cands.last()
    assert item is not None
    assert item.path == Path("c/.config/app/main.toml")
    assert len(cands) == 0
    assert cands.last() is None


def test_exhausted_sequence_stays_empty() -> None:
    cands = _dirs("a").search("app", "main", "toml")
    list(cands)
    for _ in range(3):
        assert next(cands, None) is None
        assert cands.next_back() is None
        assert cands.nth(0) is None


def test_snapshot_ignores_later_additions() -> None:
    dirs = _dirs("a")
    cands = dirs.search("app", "main", "toml")
    dirs.add_path("b")
    assert [c.path for c in cands] == [Path("a/.config/app/main.toml")]
    assert isinstance(cands, ConfigCandidates)


@given(st.integers(min_value=0, max_value=6), STEPS)
def test_each_directory_is_visited_at_most_once(count: int, steps: list[str]) -> None:
    """Any mix of steps visits distinct directories, and `len` always matches what is left."""

    dirs = _dirs(*(f"d{index}" for index in range(count)))
    cands = dirs.search("app", "main", "toml")
    seen: list[Path] = []
    for step in steps:
        before = len(cands)
        if step == "front":
            item = next(cands, None)
            expected = max(before - 1, 0)
        elif step == "back":
            item = cands.next_back()
            expected = max(before - 1, 0)
        else:
            item = cands.nth(1)
            expected = max(before - 2, 0)
        if item is not None:
            seen.append(item.path)
        assert len(cands) == expected
        assert (item is None) == (before == 0 or (step == "skip" and before == 1))
    seen.extend(item.path for item in cands)
    assert len(seen) == len(set(seen))
    assert len(cands) == 0
    assert set(seen) <= {d / "app" / "main.toml" for d in dirs.paths()}


def test_path_like_app_and_base() -> None:
    item = next(_dirs("start").search(Path("my-app"), Path(""), "kdl"))
    assert item.path == Path("start/.config/my-app/.kdl")
    assert item.local_path == Path("start/.config/my-app/.local.kdl")

    item = next(_dirs("start").search(Path(""), "main", "kdl"))
    assert item.path == Path("start/.config/main.kdl")
