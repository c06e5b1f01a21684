import pandas as pd
import pytest

from starting_word.eval import REPORT_COLUMNS, evaluate_first_guesses, main, to_frame

TARGETS = ["total", "stoal", "tally", "alloy", "atoll", "crane", "slate", "trace"]


def test_evaluate_first_guesses_defaults_to_targets():
    results = evaluate_first_guesses(TARGETS)
    assert sorted(q.guess for q in results) == sorted(TARGETS)
    assert all(q.has_winning for q in results)


def test_evaluate_first_guesses_requires_targets():
    with pytest.raises(ValueError):
        evaluate_first_guesses([])


def test_to_frame():
    results = evaluate_first_guesses(TARGETS, ["allot", "crane"])
    df = to_frame(results)
    assert list(df.columns) == REPORT_COLUMNS
    assert df["guess"].tolist() == [q.guess for q in results]
    assert not df.set_index("guess").loc["allot", "has_winning"]
    assert all(len(s) == 5 for s in df["worst_score"])


@pytest.fixture
def word_csv(tmp_path):
    path = tmp_path / "word_list.csv"
    rows = [f"{w},{100 - i}" for i, w in enumerate(TARGETS)] + ["allot,", "fjord,"]
    path.write_text("word,frequency\n" + "\n".join(rows) + "\n")
    return path


def test_main_writes_report(word_csv, tmp_path, capsys):
    out_path = tmp_path / "results.csv"
    main(["--csv", str(word_csv), "--out", str(out_path), "--workers", "1", "--top", "3"])
    out = capsys.readouterr().out
    assert "Scoring 10 guesses against 8 answers" in out
    df = pd.read_csv(out_path)
    assert len(df) == 10
    assert set(df["guess"]) == set(TARGETS) | {"allot", "fjord"}


def test_main_pair(word_csv, capsys):
    main(["--csv", str(word_csv), "--pair", "crane", "allot"])
    out = capsys.readouterr().out
    assert out.startswith("crane + allot | average")


def test_main_common_zero_is_rejected(word_csv, tmp_path):
    with pytest.raises(ValueError):
        main(["--csv", str(word_csv), "--out", str(tmp_path / "r.csv"), "--common", "0"])
