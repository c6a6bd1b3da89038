import pytest
from wavefront.tokenizer import tokenize


def test_keyword_and_tokens():
    assert tokenize("v 1.0 2.0 3.0\n") == ("v", ["1.0", "2.0", "3.0"])
    assert tokenize("f 1/2/3   4/5/6\t7/8/9") == ("f", ["1/2/3", "4/5/6", "7/8/9"])


@pytest.mark.parametrize(
    "line",
    ["", "\n", "   \t ", "# comment", "o cube", "g group", "usemtl red", "s 1", "vp 0 0"],
)
def test_skipped_lines(line):
    assert tokenize(line) is None


def test_trailing_comment():
    assert tokenize("vn 0 1 0 # up") == ("vn", ["0", "1", "0"])


def test_keyword_without_tokens():
    assert tokenize("f") == ("f", [])
