import pytest

from wordle_helper.helper_cli import main, handle_eligible, handle_random
from wordfilter.vocab import WordVocab


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("video\nallow\nvirus\nalley\nboxer\nvital\n")
    return str(path)


def test_eligible_prints_contenders_in_file_order(words_file, capsys):
    code = main(["--words", words_file, "eligible", "-c", "vi___"])
    out = capsys.readouterr().out
    assert code == 0
    assert out == "Eligible Wordle Contenders: ['video', 'virus', 'vital']\n"


def test_eligible_combines_all_evidence(words_file, capsys):
    code = main([
        "--words", words_file, "eligible",
        "--correct-positions", "a____",
        "--wrong-positions", "ll",
        "--invalid-letters", "w",
    ])
    assert code == 0
    assert capsys.readouterr().out == "Eligible Wordle Contenders: ['alley']\n"


def test_eligible_without_evidence_lists_everything(words_file, capsys):
    assert main(["--words", words_file, "eligible"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Eligible Wordle Contenders: ['video', 'allow'")


def test_random_single_word(words_file, capsys):
    assert main(["--words", words_file, "--seed", "0", "random"]) == 0
    out = capsys.readouterr().out.strip()
    prefix = "Randomly Selected Word: "
    assert out.startswith(prefix)
    assert out[len(prefix):] in {"video", "allow", "virus", "alley", "boxer", "vital"}


def test_random_several_distinct_words(words_file, capsys):
    assert main(["--words", words_file, "--seed", "0", "random", "--count", "3"]) == 0
    out = capsys.readouterr().out.strip()
    prefix = "Randomly Selected Words: "
    assert out.startswith(prefix)
    picked = out[len(prefix):].split(", ")
    assert len(picked) == 3
    assert len(set(picked)) == 3


def test_random_count_larger_than_list_fails_cleanly(words_file, capsys):
    assert main(["--words", words_file, "random", "-c", "7"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: cannot sample 7" in captured.err


def test_missing_word_file(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "missing.txt"), "eligible"]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_bundled_list_is_the_default(capsys):
    assert main(["eligible", "-c", "vide_"]) == 0
    assert capsys.readouterr().out == "Eligible Wordle Contenders: ['video']\n"


def test_subcommand_is_required():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_handlers_return_output_lines():
    vocab = WordVocab(["boxer", "boner"])
    assert handle_eligible(vocab, None, None, "x") == "Eligible Wordle Contenders: ['boner']"
    assert handle_random(vocab, 2, seed=1).startswith("Randomly Selected Words: ")


def test_any_chars_lets_multi_word_entries_through(tmp_path, capsys):
    path = tmp_path / "phrases.txt"
    path.write_text("all over\nallow\n")

    assert main(["--words", str(path), "--length", "0", "eligible", "-w", "ll"]) == 0
    assert capsys.readouterr().out == "Eligible Wordle Contenders: ['allow']\n"

    assert main(["--words", str(path), "--length", "0", "--any-chars", "eligible", "-w", "ll"]) == 0
    assert capsys.readouterr().out == "Eligible Wordle Contenders: ['all over', 'allow']\n"


def test_tab_separated_word_file(tmp_path, capsys):
    path = tmp_path / "freq.txt"
    path.write_text("video\t10\nvirus\t4\nallow\t7\n")
    assert main(["--words", str(path), "eligible", "-c", "vi"]) == 0
    assert capsys.readouterr().out == "Eligible Wordle Contenders: ['video', 'virus']\n"


def test_negative_length_is_rejected(words_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--words", words_file, "--length", "-1", "eligible"])
    assert exc.value.code == 2
    assert "--length must be 0 or a positive integer" in capsys.readouterr().err
