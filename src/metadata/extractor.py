"""Field extraction for hex_metadata.config documents.

A document is a flat sequence of Erlang terms, one per field, each terminated
by ``}.``. Values are recovered by pattern matching rather than parsing: every
term block is classified by the keyword it contains, then stripped of quoting
and binary syntax until only the value text remains.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Pattern, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, Fields
from metadata.models import FieldPair

logger = logging.getLogger(__name__)

# Letters (including non-ASCII), digits, whitespace, comma, colon, period.
_CRUFT_PATTERN = re.compile(r"[^\w\s,:.]|_")
# As above plus slash, hyphen and underscore so URLs survive.
_CRUFT_URL_PATTERN = re.compile(r"[^\w\s,:/.\-]")
# Word characters other than decimal digits: letters plus numerics such as ½ or ².
_NON_DIGIT_WORD = re.compile(r"[^\W\d_]")
_WHITESPACE = re.compile(r"\s+")
_COMMA = re.compile(r"\s*,\s*")
_REPO_LABELS = re.compile(r"links,|GitHub,", re.IGNORECASE)

# Evaluated top to bottom, first match wins.
CLASSIFICATION_RULES: List[Tuple[Pattern[str], Fields]] = [
    (re.compile(r"github", re.IGNORECASE), Fields.REPO),
    (re.compile(r"maintainers", re.IGNORECASE), Fields.MAINTAINERS),
    (re.compile(r"licenses", re.IGNORECASE), Fields.LICENSES),
    (re.compile(r"version", re.IGNORECASE), Fields.VERSION),
]

_LABEL_PATTERNS = {
    Fields.LICENSES: re.compile(r"^licenses,\s*", re.IGNORECASE),
    Fields.MAINTAINERS: re.compile(r"^maintainers,\s*", re.IGNORECASE),
    Fields.VERSION: re.compile(r"^version,\s*", re.IGNORECASE),
}


def split_terms(content: str) -> List[str]:
    """Flatten line wrapping and split a document into raw term blocks."""
    return content.replace("\n", "").split(Constants.END_OF_TERM)


def classify(block: str) -> Optional[Fields]:
    """Return the field a term block describes, or None if it is not tracked."""
    for pattern, field in CLASSIFICATION_RULES:
        if pattern.search(block):
            return field
    return None


def _keep_letter(match: re.Match) -> str:
    char = match.group()
    return char if char.isalpha() else ""


def _strip_cruft(text: str, disallowed: Pattern[str]) -> str:
    text = _NON_DIGIT_WORD.sub(_keep_letter, disallowed.sub("", text))
    return text.replace(Constants.UTF8_MARKER, "")


def _normalize_repo(text: str) -> str:
    text = _strip_cruft(text, _CRUFT_URL_PATTERN)
    text = _WHITESPACE.sub("", text)
    return _REPO_LABELS.sub("", text)


def _normalize_text(text: str, label: Pattern[str]) -> str:
    text = _strip_cruft(text, _CRUFT_PATTERN)
    text = _WHITESPACE.sub(" ", text)
    text = _COMMA.sub(",", text)
    text = text.replace(",", ", ").strip()
    return label.sub("", text)


def normalize(field: Fields, text: str) -> str:
    """Clean a raw term block (or an already clean value) for the given field.

    Applying it to its own output returns the output unchanged.
    """
    if field is Fields.REPO:
        return _normalize_repo(text)
    return _normalize_text(text, _LABEL_PATTERNS[field])


def extract(block: str) -> Optional[FieldPair]:
    """Classify and normalize one term block.

    Returns None for blocks that match no tracked field. The value may be an
    empty string; callers decide whether that counts as information.
    """
    field = classify(block)
    if field is None:
        return None
    return FieldPair(field, normalize(field, block))


def extract_fields(content: str) -> List[FieldPair]:
    """Extract every tracked, non-empty field from a metadata document."""
    pairs = []
    for block in split_terms(content):
        pair = extract(block)
        if pair is None:
            continue
        if not pair.value:
            if is_debug_enabled(logger):
                logger.debug(
                    "Dropping empty %s value",
                    pair.field.value,
                    extra=extra_context(event="decision", component="extractor", outcome="empty"),
                )
            continue
        pairs.append(pair)
    return pairs
