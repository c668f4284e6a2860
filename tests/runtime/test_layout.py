"""Tests for the user layout bootstrap."""

import asyncio

import pytest

from pandoc_resources.runtime.layout import USER_LAYOUT, ensure_user_layout, ensure_user_layout_async


EXPECTED = [
    "templates",
    "templates/ieee",
    "templates/acm",
    "templates/lncs",
    "templates/custom",
    "csl",
    "presets",
    "presets/organizations",
    "assets",
]


def test_creates_all_directories(user_dir):
    """Every known subdirectory is created under the user root."""
    created = ensure_user_layout(user_dir)

    assert user_dir.is_dir()
    for relpath in EXPECTED:
        assert (user_dir / relpath).is_dir(), relpath
    assert created[0] == user_dir
    assert len(created) == len(USER_LAYOUT)


def test_idempotent(user_dir):
    """A second call succeeds and leaves the same directories."""
    first = ensure_user_layout(user_dir)
    snapshot = sorted(p for p in user_dir.rglob("*"))

    second = ensure_user_layout(user_dir)

    assert first == second
    assert sorted(p for p in user_dir.rglob("*")) == snapshot


def test_existing_files_are_kept(user_dir, make_file):
    """Bootstrapping does not touch existing resources."""
    template = make_file(user_dir / "templates" / "ieee.latex", "\\documentclass{article}")

    ensure_user_layout(user_dir)

    assert template.read_text() == "\\documentclass{article}"


def test_async_variant(user_dir):
    """The awaitable form creates the same layout."""
    created = asyncio.run(ensure_user_layout_async(user_dir))

    assert created == ensure_user_layout(user_dir)
    assert (user_dir / "presets" / "organizations").is_dir()


def test_blocked_by_file_raises(tmp_path):
    """A file where a directory should be is surfaced to the caller."""
    user_dir = tmp_path / "pandoc"
    user_dir.mkdir()
    (user_dir / "templates").write_text("not a directory")

    with pytest.raises(OSError):
        ensure_user_layout(user_dir)
