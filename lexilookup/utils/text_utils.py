"""Text processing utilities."""

import html
import re
from urllib.parse import quote

_BLOCK_TAGS = r"(?:br|p|div|li|ul|ol|tr|table|h[1-6]|blockquote)"
_ELISION = re.compile(r"^[a-zA-Z]+['’]")


def quote_term(term: str) -> str:
    """Percent-encode a term for use as a URL path segment.

    Args:
        term: Word as typed by the user (may contain accents or spaces)

    Returns:
        URL-safe path segment
    """
    return quote(term.strip(), safe="")


def html_to_text(markup: str) -> str:
    """Convert an HTML fragment to readable plain text.

    Block-level tags become line breaks, other tags are dropped and
    entities are decoded.

    Args:
        markup: HTML fragment

    Returns:
        Plain text with at most one blank line between paragraphs
    """
    # Remove scripts, styles and comments entirely
    text = re.sub(r"(?is)<(script|style)\b.*?</\1\s*>", "", markup)
    text = re.sub(r"(?s)<!--.*?-->", "", text)

    # Block boundaries become newlines
    text = re.sub(rf"(?i)<\s*/?\s*{_BLOCK_TAGS}\b[^>]*>", "\n", text)

    # Remove remaining tags
    text = re.sub(r"<[^>]+>", "", text)
    text = html.unescape(text).replace("\xa0", " ")

    lines = [" ".join(line.split()) for line in text.splitlines()]

    # Collapse runs of blank lines
    result: list[str] = []
    for line in lines:
        if not line and (not result or not result[-1]):
            continue
        result.append(line)
    return "\n".join(result).strip()


def conjugated_form(item: str) -> str:
    """Extract the conjugated verb from a conjugation table entry.

    The last word of the entry is kept and an elided pronoun attached to
    it ("j'aime", "qu’il") is removed.

    Args:
        item: Entry such as "je mange", "que j'aime" or "mangeant"

    Returns:
        The conjugated form, or an empty string for an empty entry
    """
    words = item.split()
    if not words:
        return ""
    return _ELISION.sub("", words[-1])


def mask_matches(text: str, patterns: list[str]) -> str:
    """Blank out every match of the given patterns, keeping offsets stable.

    Matched characters are replaced by spaces, newlines are preserved so
    line and column numbers reported on the masked text stay valid.

    Args:
        text: Text to mask
        patterns: Regular expressions (inline flags allowed)

    Returns:
        Masked text of the same length as the input
    """
    chars = list(text)
    for pattern in patterns:
        for match in re.finditer(pattern, text):
            for i in range(match.start(), match.end()):
                if chars[i] != "\n":
                    chars[i] = " "
    return "".join(chars)
