from __future__ import annotations

import logging

from best_score import BEST_SCORE_FILENAME, BestScore, load_best_score, save_best_score


def test_missing_file_means_zero(tmp_path) -> None:
    assert load_best_score(tmp_path / "nope") == 0


def test_round_trip(tmp_path) -> None:
    path = tmp_path / "best"
    save_best_score(path, 42)
    assert load_best_score(path) == 42


def test_corrupt_file_is_logged_and_ignored(tmp_path, caplog) -> None:
    path = tmp_path / "best"
    path.write_text("lots", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="best_score"):
        assert load_best_score(path) == 0
    assert "Could not read best score" in caplog.text


def test_save_failure_does_not_raise(tmp_path, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="best_score"):
        save_best_score(tmp_path / "missing" / "best", 3)
    assert "Could not save best score" in caplog.text


def test_record_only_keeps_higher_scores(tmp_path) -> None:
    best = BestScore(tmp_path)
    assert best.value == 0
    assert best.record(0) is False
    assert best.record(5) is True
    assert best.record(3) is False
    assert best.value == 5
    assert (tmp_path / BEST_SCORE_FILENAME).read_text(encoding="utf-8") == "5"
    assert BestScore(tmp_path).value == 5
