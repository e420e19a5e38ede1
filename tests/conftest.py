from pathlib import Path

import pytest

from kanadle.datasets import AnswerEntry, write_word_list

WORDS = {
    "あ": [("あさがお", "朝顔"), ("あおぞら", "青空")],
    "か": [("かまきり", "蟷螂"), ("からあげ", "唐揚げ")],
    "さ": [("さかなや", "魚屋"), ("さくら", "桜")],
    "ま": [("まつたけ", "松茸")],
    # Reserved symbols get lists too, so a wrong pick would be noticed.
    "づ": [("づかづか", "づかづか")],
    "を": [("をかしげ", "をかしげ")],
    "ん": [("んまんま", "んまんま")],
}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "json"
    for sym, rows in WORDS.items():
        write_word_list([AnswerEntry(k, w) for k, w in rows], sym, d)
    return d
