import pytest

from caseconv import InvalidInputError, WordTokenizer, tokenize


class TestWordTokenizer:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello world", ["hello", "world"]),
            ("hello  world", ["hello", "world"]),
            ("  padded\t", ["padded"]),
            ("hello-world_test", ["hello", "world", "test"]),
            ("a - _ b", ["a", "b"]),
            ("helloWorld", ["hello", "World"]),
            ("HelloWorld", ["Hello", "World"]),
            ("HTTPServer", ["HTTP", "Server"]),
            ("parseHTTPResponse", ["parse", "HTTP", "Response"]),
            ("HELLO WORLD", ["HELLO", "WORLD"]),
            ("user_id2", ["user", "id2"]),
        ],
    )
    def test_boundaries(self, text, expected):
        assert WordTokenizer().tokenize(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("don't stop", ["dont", "stop"]),
            ("e.mail", ["email"]),
            ("hello, world!", ["hello", "world"]),
            ("café", ["caf"]),
        ],
    )
    def test_other_characters_are_dropped_without_splitting(self, text, expected):
        assert WordTokenizer().tokenize(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "___", "-_- ", "!!!", "..."])
    def test_no_words(self, text):
        assert WordTokenizer().tokenize(text) == []


class TestTokenizeFunction:
    def test_splits_text(self):
        assert tokenize("first name") == ["first", "name"]

    @pytest.mark.parametrize("value", [None, 123, 1.5, b"bytes", ["a"]])
    def test_rejects_non_strings(self, value):
        with pytest.raises(InvalidInputError):
            tokenize(value)
