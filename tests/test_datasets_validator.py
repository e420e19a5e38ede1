import json
from pathlib import Path

from kanadle.datasets import validate_wordlists, pretty_summary, word_list_path


def _write(p: Path, records):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")


def test_validate_wordlists_happy_path(data_dir: Path):
    rep = validate_wordlists(str(data_dir), N=4, symbols=["あ", "か", "さ", "ま"])
    assert rep["passed"] is True
    assert rep["missing"] == []
    # さくら has only three symbols
    assert rep["playable_total"] == 6
    s = pretty_summary(rep)
    assert "N=4" in s and "files=4/4" in s and s.endswith("OK")


def test_validate_wordlists_reports_missing_without_failing(data_dir: Path):
    rep = validate_wordlists(str(data_dir), N=4)
    assert rep["passed"] is True
    assert "ぬ" in rep["missing"]
    assert any("missing" in msg for msg in rep["issues"])


def test_validate_wordlists_flags_bad_records(tmp_path: Path):
    _write(word_list_path("か", tmp_path), [
        {"kana": "かまきり", "word": "蟷螂"},
        {"kana": "かまきり", "word": "蟷螂"},      # duplicate
        {"kana": "さかなや", "word": "魚屋"},      # belongs to さ
        {"kana": "kama", "word": "釜"},            # not hiragana
        {"word": "雷"},                            # no kana
    ])
    rep = validate_wordlists(str(tmp_path), N=4, symbols=["か"])
    f = rep["files"][0]
    assert rep["passed"] is False
    assert f["invalid_records"] == 2
    assert f["misplaced"] == 1
    assert f["count"] == 2 and f["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("another symbol" in msg for msg in rep["issues"])


def test_validate_wordlists_empty_dir(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path), N=4)
    assert rep["passed"] is False
    assert rep["playable_total"] == 0
    assert "FAIL" in pretty_summary(rep)
