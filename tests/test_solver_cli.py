import pytest

from guesser.quality import estimate_guess_quality, evaluate_guesses
from solver import solver_cli
from solver.solver_cli import format_suggestion, play, suggestion_lines

WORDS = ["total", "stoal", "tally", "alloy", "atoll"]


def _prompt_from(answers):
    it = iter(answers)

    def prompt(_msg):
        return next(it)

    return prompt


def test_format_suggestion():
    targets = ["total", "stoal", "tally"]
    q = estimate_guess_quality("allot", targets)
    assert format_suggestion(q, targets) == "  allot | average 1.7 left, max 2 left with yy.yy => total stoal"


def test_format_suggestion_truncates_examples():
    targets = ["aaaaa", "bbbbb", "ccccc", "ddddd"]
    q = estimate_guess_quality("zzzzz", targets)
    line = format_suggestion(q, targets, max_targets=2)
    assert line.endswith("=> aaaaa bbbbb...")


def test_suggestion_lines_show_top_and_winning():
    guesses = ["fjord", "lymph", "crane", "total"]
    targets = ["total", "stoal", "tally"]
    ranked = evaluate_guesses(guesses, targets)
    lines = suggestion_lines(ranked, targets, top=1)
    shown = [line.split()[1] if line.startswith("*") else line.split()[0] for line in lines]
    assert shown[0] == ranked[0].guess
    # "total" could win, so it is listed even outside the top rows
    assert any(line.startswith("* total") for line in lines)


def test_play_narrows_to_two(capsys):
    result = play(WORDS, WORDS, workers=1, prompt=_prompt_from(["allot", "yy.yy"]))
    out = capsys.readouterr().out
    assert result is None
    assert "There are 5 possibilities" in out
    assert "SUGGESTED GUESSES" in out
    assert "There are 2 possibilities" in out


def test_play_finds_the_word(capsys):
    result = play(WORDS, WORDS, workers=1, prompt=_prompt_from(["tally", "ggggg"]))
    assert result == "tally"
    assert "The word is: tally" in capsys.readouterr().out


def test_play_reprompts_on_bad_input(capsys):
    answers = ["toolong", "tally", "xxxxx", "GGGGG"]
    assert play(WORDS, WORDS, workers=1, prompt=_prompt_from(answers)) == "tally"
    out = capsys.readouterr().out
    assert "was not exactly 5 letters" in out
    assert "Scores should be entered as 5 characters" in out


def test_play_quit(capsys):
    assert play(WORDS, WORDS, workers=1, prompt=_prompt_from(["q"])) is None
    assert "bye!" in capsys.readouterr().out


def test_play_with_no_candidates(capsys):
    assert play(WORDS, [], workers=1) is None
    assert "no possible words remaining" in capsys.readouterr().out


def test_hard_mode_culls_guesses(monkeypatch):
    seen = []
    real = solver_cli.evaluate_guesses

    def spy(guesses, targets, **kwargs):
        seen.append(list(guesses))
        return real(guesses, targets, **kwargs)

    monkeypatch.setattr(solver_cli, "evaluate_guesses", spy)
    words = ["crane", "crate", "trace", "slate", "fjord"]
    # ..GGG for "slate" leaves crate, grate and irate as answers; only crate among the guesses
    answers = ["slate", "..GGG", "q"]
    play(words, words + ["grate", "irate"], hard=True, workers=1, prompt=_prompt_from(answers))
    assert seen[0] == words
    assert seen[1] == ["crate"]


def test_main_runs_one_round(tmp_path, monkeypatch, capsys):
    path = tmp_path / "word_list.csv"
    path.write_text("word,frequency\n" + "\n".join(f"{w},{i + 1}" for i, w in enumerate(WORDS)) + "\n")
    monkeypatch.setattr("builtins.input", lambda _msg: "quit")
    solver_cli.main(["--csv", str(path), "--workers", "1"])
    out = capsys.readouterr().out
    assert "There are 5 possibilities" in out
    assert "bye!" in out


def test_common_and_solutions_are_exclusive():
    with pytest.raises(SystemExit):
        solver_cli.build_parser().parse_args(["--common", "10", "--solutions"])


def test_common_zero_is_rejected(tmp_path):
    path = tmp_path / "word_list.csv"
    path.write_text("word,frequency\n" + "\n".join(f"{w},{i + 1}" for i, w in enumerate(WORDS)) + "\n")
    with pytest.raises(ValueError):
        solver_cli.main(["--csv", str(path), "--workers", "1", "--common", "0"])
