import pytest

from casekit.exceptions import CaseKitError, InvalidInputTypeError
from casekit.tokenizer import remove_special_chars, tokenize


@pytest.mark.parametrize(
    "value, expected",
    [
        ("HelloWorld", ["hello", "world"]),
        ("helloWorldTest", ["hello", "world", "test"]),
        ("hello_world", ["hello", "world"]),
        ("hello world", ["hello", "world"]),
        ("HELLO_WORLD", ["hello", "world"]),
        ("hello--world", ["hello", "world"]),
        ("_hello_world_", ["hello", "world"]),
        ("mixed -_\t delimiters", ["mixed", "delimiters"]),
        ("version2Beta", ["version2beta"]),
        ("XMLHttpRequest", ["xmlhttp", "request"]),
    ],
)
def test_tokenize_splits_on_delimiters_and_camel_boundaries(value, expected):
    assert tokenize(value) == expected


@pytest.mark.parametrize("value", ["", " ", "___", "-_- \n"])
def test_tokenize_empty_or_delimiter_only_input_yields_no_words(value):
    assert tokenize(value) == []


def test_tokenize_keeps_punctuation_unless_stripping():
    assert tokenize("Hello World!") == ["hello", "world!"]
    assert tokenize("Hello World!", strip_special_chars=True) == ["hello", "world"]
    assert tokenize("SPECIAL_char$", strip_special_chars=True) == ["special", "char"]
    assert tokenize("  leading and trailing ", strip_special_chars=True) == ["leading", "and", "trailing"]


def test_remove_special_chars_trims_and_keeps_delimiters():
    assert remove_special_chars("  a.b-c_d e!? ") == "ab-c_d e"


@pytest.mark.parametrize(
    "value, type_name",
    [(123, "int"), (None, "NoneType"), (b"bytes", "bytes"), (["a"], "list")],
)
def test_tokenize_rejects_non_strings(value, type_name):
    with pytest.raises(InvalidInputTypeError) as excinfo:
        tokenize(value)

    err = excinfo.value
    assert isinstance(err, TypeError)
    assert isinstance(err, CaseKitError)
    assert err.received_type == type_name
    assert str(err) == f"Expected str for input, received {type_name}"
