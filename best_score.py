from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_SCORE_FILENAME = ".snake_best_score"


def load_best_score(path: Path) -> int:
    try:
        if path.exists():
            return int(path.read_text(encoding="utf-8").strip() or "0")
    except (OSError, ValueError) as e:
        logger.warning("Could not read best score from %s: %s", path, e)
    return 0


def save_best_score(path: Path, score: int) -> None:
    try:
        path.write_text(str(score), encoding="utf-8")
    except OSError as e:
        # A lost high score should not end the game.
        logger.warning("Could not save best score to %s: %s", path, e)


class BestScore:
    """Best score kept in memory and mirrored to a small text file."""

    def __init__(self, data_dir: Path) -> None:
        self.path = Path(data_dir) / BEST_SCORE_FILENAME
        self.value = load_best_score(self.path)

    def record(self, score: int) -> bool:
        """Store score if it beats the current best. Returns True when it did."""
        if score <= self.value:
            return False
        self.value = score
        save_best_score(self.path, score)
        logger.info("New best score: %d", score)
        return True
