"""
Offline recognition of three-word-address shaped text.

Nothing here talks to the service: these checks only say whether text
*looks like* an address. Confirming that the words exist is
``GeocodingClient.is_valid_3wa``.

A segment is a run of Unicode letters (combining marks allowed after the
first letter), so words in any script the word lists use are accepted.
The regexes below only find the shape; the letter test is done per segment
with ``unicodedata`` because ``re`` has no class for combining marks.
"""
from __future__ import annotations

import re
import unicodedata
from typing import Iterator, List

# Full stop and its equivalents in other scripts: ｡ 。 ･ ・ ︒ ។ ։ ။ ۔ ። ।
DELIMITERS = ".｡。･・︒។։။۔።।"
# Extra separators tolerated by did_you_mean: space, no-break space, ideographic space, hyphen
LOOSE_SEPARATORS = DELIMITERS + " \u00a0\u3000-"

_PUNCTUATION = "!\"#$%&'()*+,-/:;<=>?@[\\]^_`{|}~£§º©®"

_D = f"[{re.escape(DELIMITERS)}]"
# anything that can sit inside a token: not space, punctuation or a delimiter
_GLUE = f"[^\\s{re.escape(_PUNCTUATION + DELIMITERS)}]"
# candidate segment: a token run without digits
_SEG = f"[^\\s\\d{re.escape(_PUNCTUATION + DELIMITERS)}]+"

# \2 forces the second delimiter to repeat the first
_SHAPE = re.compile(f"({_SEG})({_D})({_SEG})\\2({_SEG})")

_CANDIDATE = re.compile(
    f"(?<!{_GLUE})(?<!{_D})"
    f"({_SEG})({_D})({_SEG})\\2({_SEG})"
    f"(?!{_GLUE})(?!{_D}{_GLUE})"
)

_LOOSE_SHAPE = re.compile(
    f"({_SEG})([{re.escape(LOOSE_SEPARATORS)}]{{1,2}})({_SEG})\\2({_SEG})"
)


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")

# zero-width non-joiner and joiner occur inside Persian and Indic words
_JOINERS = "\u200c\u200d"

def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in "LM" or ch in _JOINERS

def _is_word(segment: str) -> bool:
    return bool(segment) and _is_letter(segment[0]) and all(_is_word_char(c) for c in segment)

def _leading_word(segment: str) -> str:
    if not segment or not _is_letter(segment[0]):
        return ""
    end = 1
    while end < len(segment) and _is_word_char(segment[end]):
        end += 1
    return segment[:end]

def _trailing_word(segment: str) -> str:
    start = len(segment)
    while start > 0 and _is_word_char(segment[start - 1]):
        start -= 1
    # a combining mark cannot open a word
    while start < len(segment) and not _is_letter(segment[start]):
        start += 1
    return segment[start:]


def is_possible_3wa(text: str) -> bool:
    """
    True when the whole of ``text`` (surrounding whitespace ignored) is three
    letter-only words joined by two identical delimiters, e.g.
    ``filled.count.soap``.
    """
    m = _SHAPE.fullmatch(text.strip())
    if m is None:
        return False
    return all(_is_word(m.group(i)) for i in (1, 3, 4))


def iter_possible_3wa(text: str) -> Iterator[str]:
    """
    Yield every standalone address-shaped substring of ``text``, left to
    right, exactly as written. Punctuation around a match is left out; a
    run of four or more dotted words yields nothing.
    """
    for m in _CANDIDATE.finditer(text):
        first = _trailing_word(m.group(1))
        last = _leading_word(m.group(4))
        if not first or not last or not _is_word(m.group(3)):
            continue
        start = m.end(1) - len(first)
        end = m.start(4) + len(last)
        yield text[start:end]


def find_possible_3wa(text: str) -> List[str]:
    """All matches of :func:`iter_possible_3wa` as a list (empty when none)."""
    return list(iter_possible_3wa(text))


def did_you_mean(text: str) -> bool:
    """
    Looser check for addresses typed without the canonical delimiter:
    ``filled count soap`` and ``filled-count-soap`` pass. Both gaps must use
    the same separator; run-together words never pass.
    """
    m = _LOOSE_SHAPE.fullmatch(text.strip())
    if m is None or len(set(m.group(2))) != 1:
        return False
    return all(_is_word(m.group(i)) for i in (1, 3, 4))
