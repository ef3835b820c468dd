# src/common/score_store.py
import json
import os
from datetime import datetime, timezone
from typing import List, Dict, Any


def format_duration(seconds: int) -> str:
    """Formats elapsed seconds as m:ss."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


class ScoreStore:
    """
    Keeps finished-game records in a small JSON file. A missing or unreadable
    file is treated as an empty leaderboard.
    """
    def __init__(self, path: str):
        self.path = path

    def load_scores(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, json.JSONDecodeError) as e:
            print(f"WARNING: Failed to load scores from '{self.path}': {e}")
            return []
        if not isinstance(data, list):
            print(f"WARNING: Score file '{self.path}' does not hold a list; ignoring it.")
            return []
        scores = [r for r in data if self._is_valid_record(r)]
        if len(scores) != len(data):
            print(f"WARNING: Dropped {len(data) - len(scores)} malformed record(s) from '{self.path}'.")
        return scores

    @staticmethod
    def _is_valid_record(record: Any) -> bool:
        if not isinstance(record, dict):
            return False
        return all(isinstance(record.get(key), int) and not isinstance(record.get(key), bool)
                   for key in ("score", "seconds"))

    def save_scores(self, scores: List[Dict[str, Any]]) -> bool:
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(scores, f, indent=2)
            return True
        except OSError as e:
            print(f"WARNING: Failed to save scores to '{self.path}': {e}")
            return False

    def add_score(self, name: str, score: int, seconds: int) -> Dict[str, Any]:
        record = {
            "name": name or "Player",
            "score": int(score),
            "seconds": int(seconds),
            "date": datetime.now(timezone.utc).isoformat(),
        }
        scores = self.load_scores()
        scores.append(record)
        self.save_scores(self._sorted(scores))
        return record

    def get_leaderboard(self) -> List[Dict[str, Any]]:
        return self._sorted(self.load_scores())

    @staticmethod
    def _sorted(scores: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Higher score first, faster time breaks ties
        return sorted(scores, key=lambda r: (-r.get("score", 0), r.get("seconds", 0)))
