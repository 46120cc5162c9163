"""Per-line comment and string removal.

The sanitizer is not a lexer. Escapes inside string literals are not
understood, so ``"a \\" b"`` ends at the escaped quote, and a ``/*`` with no
closing ``*/`` on the same line simply drops the rest of that line.
Callers that want block comments tracked across lines thread the
``in_block`` flag returned by :func:`scan_line` themselves.
"""

from typing import Sequence

COMMENT_PREFIXES = ("//", "/*", "*", "#")


def is_comment_line(trimmed: str) -> bool:
    """True for a trimmed line that starts with a comment marker."""
    return trimmed.startswith(COMMENT_PREFIXES)


def scan_line(
    line: str,
    line_comments: Sequence[str] = ("//",),
    keep_strings: bool = False,
    in_block: bool = False,
) -> tuple[str, bool]:
    """Strip comments (and optionally strings) from one line.

    Args:
        line: Raw line text
        line_comments: Markers that end the line's code, e.g. ``("//",)``
        keep_strings: Keep string literals verbatim instead of blanking them
        in_block: The line starts inside a ``/* ... */`` comment

    Returns:
        ``(text, in_block)`` where ``in_block`` is True when the line ends
        inside an unterminated block comment.
    """
    out: list[str] = []
    i = 0
    n = len(line)

    while i < n:
        if in_block:
            end = line.find("*/", i)
            if end == -1:
                return "".join(out), True
            out.append(" ")
            i = end + 2
            in_block = False
            continue

        if any(line.startswith(marker, i) for marker in line_comments):
            break

        if line.startswith("/*", i):
            end = line.find("*/", i + 2)
            if end == -1:
                return "".join(out), True
            out.append(" ")
            i = end + 2
            continue

        ch = line[i]
        if ch == '"' or ch == "'":
            end = line.find(ch, i + 1)
            if keep_strings:
                if end == -1:
                    out.append(line[i:])
                    break
                out.append(line[i : end + 1])
            else:
                out.append(" ")
                if end == -1:
                    break
            i = end + 1
            continue

        out.append(ch)
        i += 1

    return "".join(out), False


def sanitize_line(line: str, line_comments: Sequence[str] = ("//",)) -> str:
    """Remove same-line comments and string contents from a line."""
    return scan_line(line, line_comments)[0]


def strip_comments(line: str, line_comments: Sequence[str] = ("//",)) -> str:
    """Remove same-line comments but keep string literals intact."""
    return scan_line(line, line_comments, keep_strings=True)[0]
