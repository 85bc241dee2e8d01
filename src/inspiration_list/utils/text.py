"""Text helpers shared by the record store and the enrichment heuristic."""

import re

CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")
_WHITESPACE = re.compile(r"\s+")
# CJK runs, or runs of other word characters (letters/digits, no underscore)
_TOKEN_PATTERN = re.compile(r"[\u4e00-\u9fff]+|[^\W_\u4e00-\u9fff]+")


def normalize_whitespace(text: str) -> str:
    """Trim and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


def truncate(text: str, max_length: int, suffix: str = "...") -> str:
    """Cut text to max_length characters, appending suffix when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def contains_cjk(text: str) -> bool:
    return CJK_PATTERN.search(text) is not None


def detect_language(text: str) -> str:
    """Return 'zh' when the text contains CJK ideographs, else 'en'."""
    return "zh" if contains_cjk(text) else "en"


def tokenize(text: str) -> list[str]:
    """Split lower-cased text into CJK runs and alphanumeric words.

    "我想做一个APP" -> ["我想做一个", "app"]
    """
    return _TOKEN_PATTERN.findall(text.lower())


def count_words(text: str) -> int:
    """Count alphanumeric words plus individual CJK ideographs."""
    count = 0
    for token in tokenize(text):
        if CJK_PATTERN.match(token):
            count += len(token)
        else:
            count += 1
    return count
