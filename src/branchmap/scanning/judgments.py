"""Per-branch judgments: hardcoded literals, purity, temporal logic.

All four checks are textual heuristics over one comment-stripped line with
string literals kept. None of them look at other lines or resolve names.
"""

import re
from typing import Iterable

# Digit run of exactly four, not part of a longer number
_YEAR = re.compile(r"(?<!\d)(\d{4})(?!\d)")

# Epoch-seconds style timestamp: 10+ digits starting with 1, standalone token
_TIMESTAMP = re.compile(r"(?<![\w.])1\d{9,}(?![\w.])")

_IF_WORD = re.compile(r"(?<!\w)if(?!\w)")

_COMPARISON_OPERATORS = ("==", "!=", ">", "<")

# Powers of two and sentinels that are not worth flagging
COMMON_VALUES = frozenset(
    {"0", "1", "2", "4", "8", "16", "32", "64", "128", "256", "512", "1024", "-1"}
)

_NUMERIC_CHARS = frozenset("0123456789-.")

IMPURE_TOKENS: dict[str, tuple[str, ...]] = {
    "filesystem": (
        "fs::", "File::", "Path::", ".read(", ".write(",
        "open(", "os.path", "readFile", "writeFile", "os.Open", "ioutil.",
    ),
    "clock": (
        "SystemTime::", "Instant::", "time.time(", "datetime.now", "Date.now",
        "new Date(", "time.Now(", "System.currentTimeMillis",
    ),
    "environment": (
        "environment_var", "env::var", "os.environ", "os.getenv", "process.env",
        "System.getenv", "os.Getenv",
    ),
    "global_state": ("GLOBAL_",),
    "randomness": ("rand::", ".gen_bool", "random.", "Math.random"),
    "network": ("http_client", "socket", "requests.", "fetch(", "http.Get", "urllib"),
}

DEFAULT_IMPURE_TOKENS: tuple[str, ...] = tuple(
    token for group in IMPURE_TOKENS.values() for token in group
)

_FUTURE_YEARS = frozenset({2025, 2026, 2027})
_PAST_YEARS = frozenset({2020, 2021, 2022})
_API_AT_LEAST = re.compile(r"api_(?:level|version)\s*>=")
_API_BELOW = re.compile(r"api_(?:level|version)\s*<")
_FUTURE_VOCABULARY = ("feature_flag", "beta_feature")
_PAST_VOCABULARY = ("deprecated", "end_of_life", "support_end")


def year_tokens(line: str) -> list[int]:
    return [int(y) for y in _YEAR.findall(line)]


def is_comparison(line: str) -> bool:
    """Line holds a comparison operator or an ``if``."""
    return any(op in line for op in _COMPARISON_OPERATORS) or bool(_IF_WORD.search(line))


def has_hardcoded_date(line: str) -> bool:
    years = year_tokens(line)
    if (line.count("-") >= 2 or line.count("/") >= 2) and any(2019 <= y <= 2027 for y in years):
        return True
    if is_comparison(line) and any(1990 <= y <= 2030 for y in years):
        return True
    return bool(_TIMESTAMP.search(line))


def _numeric_token(word: str) -> str:
    start, end = 0, len(word)
    while start < end and word[start] not in _NUMERIC_CHARS:
        start += 1
    while end > start and word[end - 1] not in _NUMERIC_CHARS:
        end -= 1
    return word[start:end]


def count_hardcoded_values(line: str) -> int:
    """Count magic numbers and compared string literals on a comparison line."""
    if not is_comparison(line):
        return 0

    count = 0
    for word in line.split():
        token = _numeric_token(word)
        if len(token) < 2 or token in COMMON_VALUES:
            continue
        if not set(token) <= _NUMERIC_CHARS:
            continue
        try:
            float(token)
        except ValueError:
            continue
        try:
            if 1900 <= int(token) <= 2100:
                continue
        except ValueError:
            pass
        count += 1

    if '"' in line and ("==" in line or "!=" in line):
        count += line.count('"') // 2

    return count


def is_pure(line: str, impure_tokens: Iterable[str] = DEFAULT_IMPURE_TOKENS) -> bool:
    return not any(token in line for token in impure_tokens)


def is_future_logic(line: str) -> bool:
    if any(y in _FUTURE_YEARS for y in year_tokens(line)):
        return True
    if ">=" in line and ('"2.' in line or '"3.' in line):
        return True
    if _API_AT_LEAST.search(line):
        return True
    lowered = line.lower()
    return any(word in lowered for word in _FUTURE_VOCABULARY)


def is_past_logic(line: str) -> bool:
    if any(y in _PAST_YEARS for y in year_tokens(line)):
        return True
    if "<" in line and ('"1.' in line or '"0.' in line):
        return True
    if _API_BELOW.search(line):
        return True
    lowered = line.lower()
    return any(word in lowered for word in _PAST_VOCABULARY)
