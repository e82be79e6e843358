import json

import pytest

from game.dodge import ports
from game.dodge.ports import JsonFileStore, MemoryStore, load_best, parse_score, save_best


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("-3", 0.0),
        ("12.5", 12.5),
        ("0", 0.0),
    ],
)
def test_parse_score(raw, expected):
    assert parse_score(raw) == expected


def test_memory_store():
    store = MemoryStore()
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"


def test_best_score_helpers(best_key):
    store = MemoryStore()
    assert load_best(store, best_key) == 0.0
    save_best(store, best_key, 3.25)
    assert load_best(store, best_key) == 3.25


def test_json_store_persists_between_instances(tmp_path, best_key):
    path = tmp_path / "nested" / "best.json"
    save_best(JsonFileStore(str(path)), best_key, 7.5)

    assert load_best(JsonFileStore(str(path)), best_key) == 7.5
    assert json.loads(path.read_text())[best_key] == "7.5"


def test_json_store_keeps_other_keys(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"other": "x"}))
    store = JsonFileStore(str(path))
    store.set("mine", "1")
    assert store.get("other") == "x"
    assert store.get("mine") == "1"


def test_json_store_write_leaves_only_the_store_file(tmp_path):
    path = tmp_path / "store.json"
    store = JsonFileStore(str(path))
    store.set("a", "1")
    store.set("b", "2")
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]
    assert json.loads(path.read_text()) == {"a": "1", "b": "2"}


def test_json_store_failed_write_keeps_old_file(tmp_path, monkeypatch):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"best": "3.0"}))

    def broken_dump(obj, f, **kwargs):
        f.write("{\"best\": ")
        raise OSError("disk full")

    monkeypatch.setattr(ports.json, "dump", broken_dump)
    with pytest.raises(OSError):
        JsonFileStore(str(path)).set("best", "9.0")
    monkeypatch.undo()

    assert json.loads(path.read_text()) == {"best": "3.0"}
    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_json_store_missing_file(tmp_path):
    assert JsonFileStore(str(tmp_path / "nope.json")).get("k") is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", ""])
def test_json_store_bad_file_reads_as_empty(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content)
    store = JsonFileStore(str(path), verbose=1)
    assert store.get("k") is None
    store.set("k", "2.0")
    assert store.get("k") == "2.0"
