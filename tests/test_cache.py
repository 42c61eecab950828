import logging
import pickle
from pathlib import Path

import pytest
from wordle_info.datasets import read_permutation_cache, write_permutation_cache
from wordle_info.engine import PermutationCache, generate_patterns


def test_build_respects_max_length():
    cache = PermutationCache.build(["cat", "slate", "planet"], max_length=5)
    assert sorted(cache.words()) == ["cat", "slate"]
    assert "planet" not in cache
    assert len(cache.get("cat")) == 27


def test_get_miss_warns_and_remembers(caplog):
    cache = PermutationCache()
    with caplog.at_level(logging.WARNING):
        patterns = cache.get("crane")
    assert len(patterns) == 243
    assert "crane" in cache
    assert any("crane" in rec.getMessage() for rec in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        assert cache.get("crane") is patterns
    assert not caplog.records


def test_ensure_fills_only_missing(caplog):
    cache = PermutationCache.build(["slate"])
    with caplog.at_level(logging.WARNING):
        added = cache.ensure(["slate", "crane", "blimp"])
    assert added == 2
    assert cache.missing(["slate", "crane", "blimp"]) == []
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1
    assert cache.ensure(["crane"]) == 0


def test_cache_file_roundtrip(tmp_path: Path):
    cache = PermutationCache.build(["slate", "eerie"])
    out = write_permutation_cache(cache, tmp_path / "sub" / "perm.pkl")
    loaded = read_permutation_cache(out)
    assert sorted(loaded) == ["eerie", "slate"]
    assert loaded.get("slate") == generate_patterns("slate")


def test_cache_format_mismatch(tmp_path: Path):
    p = tmp_path / "perm.pkl"
    with p.open("wb") as f:
        pickle.dump({"format": 99, "patterns": {}}, f)
    with pytest.raises(ValueError, match="format"):
        read_permutation_cache(p)

    with p.open("wb") as f:
        pickle.dump(["not", "a", "cache"], f)
    with pytest.raises(ValueError):
        read_permutation_cache(p)


def test_cache_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_permutation_cache(tmp_path / "absent.pkl")
