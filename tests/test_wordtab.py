from fractol.wordtab import find_substring, find_substring_unquoted, str_to_wordtab


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  80 60\t4 1 ") == ["80", "60", "4", "1"]


def test_wordtab_keeps_newlines_inside_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_wordtab_of_blank_text_is_empty():
    assert str_to_wordtab("") == []
    assert str_to_wordtab(" \t ") == []


def test_wordtab_join_round_trip():
    words = ["c", "#FF0000", "s", "red"]
    assert str_to_wordtab(" ".join(words)) == words


def test_find_substring_matches_str_index():
    text = "hello world"
    assert find_substring(text, "world", len(text)) == text.index("world")


def test_find_substring_returns_first_occurrence():
    text = 'a "b" "c"'
    assert find_substring(text, '"', len(text)) == text.index('"')


def test_find_substring_pattern_longer_than_length():
    assert find_substring("abcdef", "abc", 2) == -1


def test_find_substring_not_found():
    assert find_substring("abcdef", "xyz", 6) == -1


def test_find_substring_stops_at_nul():
    assert find_substring("ab\0cd", "cd", 5) == -1


def test_unquoted_skips_match_inside_quotes():
    text = '"/*" /* x */'
    assert find_substring_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_unquoted_all_quoted_is_not_found():
    text = '"// inside"'
    assert find_substring_unquoted(text, "//", len(text)) == -1


def test_unquoted_outside_quotes_matches_plain_search():
    text = "abc // comment"
    assert find_substring_unquoted(text, "//", len(text)) == find_substring(
        text, "//", len(text)
    )


def test_unquoted_pattern_longer_than_length():
    assert find_substring_unquoted("// x", "//", 1) == -1