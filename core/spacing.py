"""
Mixed-script spacing.

Inserts a single space between CJK characters and Latin letters/digits,
e.g. "这是test文本" -> "这是 test 文本". Applying it twice changes nothing.
"""
import re

# Han, Kana, Bopomofo, CJK radicals/symbols and compatibility ideographs
CJK_CHARS = (
    "\u2e80-\u2eff"
    "\u2f00-\u2fdf"
    "\u3040-\u309f"
    "\u30a0-\u30fa"
    "\u30fc-\u30ff"
    "\u3100-\u312f"
    "\u3200-\u32ff"
    "\u3400-\u4dbf"
    "\u4e00-\u9fff"
    "\uf900-\ufaff"
)

LATIN_ALNUM = "A-Za-z0-9"

_BOUNDARY = re.compile(
    rf"(?<=[{CJK_CHARS}])(?=[{LATIN_ALNUM}])|(?<=[{LATIN_ALNUM}])(?=[{CJK_CHARS}])"
)


def add_spacing(text: str) -> str:
    """Return `text` with a space at every CJK/Latin-alphanumeric boundary."""
    if not text:
        return text
    return _BOUNDARY.sub(" ", text)
