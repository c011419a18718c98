from pathlib import Path

import pytest

from anagrams.engine import Engine

def _seed(tmp: Path) -> str:
    f = tmp / "words.txt"
    f.write_text("art\ntar\nrat\n", encoding="utf-8")
    return str(f)

@pytest.mark.e2e
def test_persist_cache_and_reload(tmp_path: Path):
    cache = tmp_path / "cache" / "index.pkl"

    e1 = Engine()
    e1.build(roots=[_seed(tmp_path)], cache=str(cache))
    e1.shutdown()
    assert cache.exists()
    assert not Path(f"{cache}.tmp").exists()

    e2 = Engine()
    try:
        e2.load(cache=str(cache))
        assert sorted(e2.sentence_anagrams(["rat"])) == [("art",), ("rat",), ("tar",)]
    finally:
        e2.shutdown()

@pytest.mark.e2e
def test_load_missing_cache_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        Engine().load(cache=str(tmp_path / "missing.pkl"))

def test_load_without_cache_raises():
    with pytest.raises(ValueError):
        Engine().load()
