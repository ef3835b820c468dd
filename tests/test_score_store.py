import json

from common.score_store import ScoreStore, format_duration


def test_missing_file_is_empty(tmp_path):
    assert ScoreStore(str(tmp_path / "scores.json")).get_leaderboard() == []


def test_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{broken", encoding="utf-8")
    assert ScoreStore(str(path)).load_scores() == []


def test_leaderboard_order(tmp_path):
    store = ScoreStore(str(tmp_path / "scores.json"))
    store.add_score("Anna", 40, 300)
    store.add_score("Bela", 55, 500)
    store.add_score("Csilla", 40, 120)
    names = [r["name"] for r in store.get_leaderboard()]
    assert names == ["Bela", "Csilla", "Anna"]

    saved = json.loads((tmp_path / "scores.json").read_text(encoding="utf-8"))
    assert [r["name"] for r in saved] == names
    assert all("date" in r for r in saved)


def test_blank_name(tmp_path):
    record = ScoreStore(str(tmp_path / "scores.json")).add_score("", 3, 10)
    assert record["name"] == "Player"


def test_format_duration():
    assert format_duration(0) == "0:00"
    assert format_duration(75) == "1:15"
    assert format_duration(61.9) == "1:01"


def test_malformed_records_are_dropped(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([1, "x", {"name": "a", "score": "12", "seconds": 5},
                                {"name": "b", "score": 3}, {"name": "c", "score": 9, "seconds": 40}]),
                    encoding="utf-8")
    store = ScoreStore(str(path))
    assert [r["name"] for r in store.get_leaderboard()] == ["c"]


def test_non_list_file_is_empty(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"score": 5}), encoding="utf-8")
    assert ScoreStore(str(path)).get_leaderboard() == []
