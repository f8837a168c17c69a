import pytest

from absurdle_env import InvalidConfiguration
from lexicon import default_path, load_file, load_lexicon, prune_dictionary


def test_prune_dictionary_keeps_exact_length():
    assert prune_dictionary(["cat", "crane", "slate", "trees", "a"], 5) == {
        "crane",
        "slate",
        "trees",
    }


def test_prune_dictionary_rejects_bad_length():
    with pytest.raises(InvalidConfiguration):
        prune_dictionary(["crane"], 0)


def test_load_file_splits_on_whitespace(tmp_path):
    src = tmp_path / "words.txt"
    src.write_text("crane slate\nplate\n\n  trace\n", encoding="utf-8")
    assert load_file(src) == ["crane", "slate", "plate", "trace"]


def test_load_lexicon_txt_normalises(tmp_path):
    src = tmp_path / "words.txt"
    src.write_text("Crane\nslate\nSLATE\nárbol\nab-cd\ncat\n", encoding="utf-8")
    lex = load_lexicon(src, word_length=5)
    assert lex.words == ["arbol", "crane", "slate"]
    assert lex.word_length == 5
    assert lex.source == src


def test_load_lexicon_csv(tmp_path):
    src = tmp_path / "words.csv"
    src.write_text("word,count\ncrane,10\nplate,3\nbird,4\n", encoding="utf-8")
    assert load_lexicon(src, word_length=5).words == ["crane", "plate"]


def test_load_lexicon_csv_without_word_column(tmp_path):
    src = tmp_path / "words.csv"
    src.write_text("token\ncrane\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon(src, word_length=5)


def test_load_lexicon_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "nope.txt", word_length=5)


def test_load_lexicon_no_words_of_length(tmp_path):
    src = tmp_path / "words.txt"
    src.write_text("cat\ndog\n", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_lexicon(src, word_length=5)


def test_load_lexicon_bad_length():
    with pytest.raises(InvalidConfiguration):
        load_lexicon(word_length=0)


@pytest.mark.parametrize("length", [4, 5])
def test_bundled_word_lists(length):
    assert default_path(length).exists()
    lex = load_lexicon(word_length=length)
    assert len(lex.words) > 100
    assert all(len(w) == length for w in lex.words)
