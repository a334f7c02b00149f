import pytest

from cvtext.fragments import TextFragment


@pytest.fixture
def frag():
    def _frag(x, y, text, font_size=12.0):
        return TextFragment(x=x, y=y, text=text, font_size=font_size)
    return _frag


@pytest.fixture
def two_column_fragments(frag):
    """Eight sidebar fragments at x 5..40 and eight main fragments at x 110..180."""
    sidebar = [frag(5 + 5 * i, 10 + 2 * i, f"Side{i}") for i in range(8)]
    main = [frag(110 + 10 * i, 10 + 2 * i, f"Main{i}") for i in range(8)]
    return sidebar + main
