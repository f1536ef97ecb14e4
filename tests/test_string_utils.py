from leetsolve.string_utils import remove_non_alphanumeric


def test_removes_punctuation_and_spaces():
    assert remove_non_alphanumeric("A man, a plan") == "Amanaplan"


def test_alphanumeric_input_unchanged():
    text = "abc123XYZ"
    assert remove_non_alphanumeric(text) == text


def test_result_is_all_alphanumeric():
    result = remove_non_alphanumeric("a.b-c d!e?1_2")
    assert all(c.isalnum() for c in result)
    assert len(result) == 7


def test_only_symbols_gives_empty():
    assert remove_non_alphanumeric(" .,;:!") == ""