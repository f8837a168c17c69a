import pytest

from absurdle_env import AbsurdleEnv, Symbol
from play import main, play, render_pattern, score_line

WORDS = ["crane", "crate", "trace", "slate", "plate"]


def _scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_render_pattern_styles():
    pat = (Symbol.HIT, Symbol.PRESENT, Symbol.MISS)
    assert render_pattern(pat) == "!*%"
    assert render_pattern(pat, "emoji") == "\U0001f7e9\U0001f7e8⬛"


def test_play_until_win():
    env = AbsurdleEnv(vocabulary=WORDS, word_length=5)
    out = []
    patterns = play(env, read=_scripted(["crane", "plate"]), write=out.append)
    assert [render_pattern(p) for p in patterns] == ["%%!%!", "!!!!!"]
    assert ": %%!%!" in out
    assert "Absurdle 2/∞" in out
    assert out[-2:] == ["%%!%!", "!!!!!"]


def test_play_reports_bad_length_and_continues():
    env = AbsurdleEnv(vocabulary=WORDS, word_length=5)
    out = []
    play(env, read=_scripted(["cat", "", "crane", "plate"]), write=out.append)
    assert "Guesses must be 5 letters long." in out
    assert len(env.history) == 2


def test_play_stops_on_eof():
    env = AbsurdleEnv(vocabulary=WORDS, word_length=5)
    out = []
    play(env, read=_scripted(["crane"]), write=out.append)
    assert not env.game_over()
    assert "Absurdle 1/∞" in out


def test_score_line_with_cap():
    env = AbsurdleEnv(vocabulary=WORDS, word_length=5, max_guesses=6)
    env.guess("crane")
    assert score_line(env) == "Absurdle 1/6"


def test_main_with_flags(tmp_path, monkeypatch, capsys):
    src = tmp_path / "words.txt"
    src.write_text("\n".join(WORDS), encoding="utf-8")
    monkeypatch.setattr("builtins.input", _scripted(["crane", "slate"]))
    main(["--words", str(src), "--length", "5"])
    out = capsys.readouterr().out
    assert "Welcome to the game of Absurdle." in out
    assert "Absurdle 2/∞" in out


def test_main_bad_length_exits(tmp_path, capsys):
    src = tmp_path / "words.txt"
    src.write_text("\n".join(WORDS), encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--words", str(src), "--length", "0"])
    assert "[error]" in capsys.readouterr().err
