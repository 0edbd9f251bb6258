import unittest
from unittest import mock

from vaformat import tokens


class TestEstimateTokens(unittest.TestCase):
    def test_counts_encoded_tokens(self):
        encoding = mock.Mock()
        encoding.encode.return_value = [1, 2, 3]
        with mock.patch.object(tokens.tiktoken, "get_encoding", return_value=encoding) as get_encoding:
            self.assertEqual(tokens.estimate_tokens("some text"), 3)
        get_encoding.assert_called_once_with("cl100k_base")
        encoding.encode.assert_called_once_with("some text", disallowed_special=())

    def test_custom_encoding(self):
        encoding = mock.Mock()
        encoding.encode.return_value = []
        with mock.patch.object(tokens.tiktoken, "get_encoding", return_value=encoding) as get_encoding:
            self.assertEqual(tokens.estimate_tokens("", "o200k_base"), 0)
        get_encoding.assert_called_once_with("o200k_base")


if __name__ == "__main__":
    unittest.main()
