import io

import pytest

from beesolve.pages import count_pages, main


def test_short_line_fits_one_page():
    assert count_pages("a b c", 1, 5) == 1


def test_line_overflows_to_second_line():
    assert count_pages("a b c", 1, 4) == 2


def test_empty_text_is_one_page():
    assert count_pages("", 3, 10) == 1


def test_full_width_words_take_a_line_each():
    words = ["abcde"] * 7
    assert count_pages(" ".join(words), 1, 5) == len(words)


def test_more_lines_per_page_never_needs_more_pages():
    text = "uma frase com varias palavras para quebrar em linhas curtas"
    counts = [count_pages(text, lines, 10) for lines in range(1, 8)]
    assert counts == sorted(counts, reverse=True)


def test_width_counts_bytes():
    assert count_pages("\u00e9", 1, 1) > count_pages("e", 1, 1)


def test_zero_lines_per_page_rejected():
    with pytest.raises(ValueError):
        count_pages("a", 0, 5)


def test_main_processes_until_end(monkeypatch, capsys):
    text = "3 1 5\na b c\n3 1 4\na b c\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main()
    out = capsys.readouterr().out
    assert out == f"{count_pages('a b c', 1, 5)}\n{count_pages('a b c', 1, 4)}\n"