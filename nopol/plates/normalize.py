"""
License Plate Normalization

Turns speech recognition output into canonical Indonesian plates.

Canonical form: prefix (1-2 letters) + digits (1-4) + optional suffix
(1-3 letters), uppercase, no separators, e.g. B1234ABC, AB123, B2.
The prefix must be a known regional code.
"""

import logging
import re
from typing import Callable, FrozenSet, Optional, Tuple

from nopol.plates.phonetics import PHONETIC_LOOKUP, substitution_order
from nopol.plates.prefixes import VALID_PREFIXES
from nopol.schemas import PlateCandidate


logger = logging.getLogger(__name__)

FULL_PLATE_PATTERN = re.compile(r'^([A-Z]{1,2})([0-9]{1,4})([A-Z]{1,3})$')
PARTIAL_PLATE_PATTERN = re.compile(r'^([A-Z]{1,2})([0-9]{1,4})$')

_DISALLOWED_CHARS = re.compile(r'[^A-Z0-9\s]')
_WHITESPACE = re.compile(r'\s+')

# (compiled whole-word pattern, replacement), longest phrase first
_WORD_SUBSTITUTIONS = tuple(
    (re.compile(r'\b' + re.escape(heard) + r'\b', re.IGNORECASE), meant)
    for heard, meant in substitution_order()
)


def _match_plate(text: str) -> Optional[PlateCandidate]:
    """Match full grammar, then partial grammar; prefix must be valid"""
    for pattern in (FULL_PLATE_PATTERN, PARTIAL_PLATE_PATTERN):
        match = pattern.match(text)
        if match and match.group(1) in VALID_PREFIXES:
            return PlateCandidate(*match.groups())
    return None


def _apply_phonetic_substitutions(text: str) -> str:
    """Replace every literal occurrence of each heard phrase"""
    for heard, meant in substitution_order():
        text = text.replace(heard, meant)
    return text


def _normalize_text(text: str) -> str:
    text = _DISALLOWED_CHARS.sub('', text)
    return _WHITESPACE.sub(' ', text).strip()


def _strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub('', text)


# Parsing strategies. Each takes the normalized text and returns a string to
# match against the plate grammar, or None when it has nothing to offer.

def _per_word_remap(text: str) -> Optional[str]:
    return ''.join(PHONETIC_LOOKUP.get(word, word) for word in text.split())


def _word_boundary_remap(text: str) -> Optional[str]:
    for pattern, meant in _WORD_SUBSTITUTIONS:
        text = pattern.sub(meant, text)
    return _strip_whitespace(text)


def _direct(text: str) -> Optional[str]:
    return _strip_whitespace(text)


def _token_reconstruction(text: str) -> Optional[str]:
    # "B 1234 ABC" -> "B1234ABC"
    parts = text.split()
    if len(parts) < 2:
        return None
    return ''.join(parts)


def _bucket_reassembly(text: str) -> Optional[str]:
    """
    Rebuild from letters and digits pulled out separately.

    Letters positioned before the first digit form the prefix, every other
    letter (in order) the suffix; all digits go in between.
    """
    compact = _strip_whitespace(text)
    digits = ''.join(ch for ch in compact if ch.isdigit())
    if not digits or not any(ch.isalpha() for ch in compact):
        return None

    first_digit = next(i for i, ch in enumerate(compact) if ch.isdigit())
    leading = ''.join(ch for ch in compact[:first_digit] if ch.isalpha())
    trailing = ''.join(ch for ch in compact[first_digit:] if ch.isalpha())
    return f"{leading}{digits}{trailing}"


STRATEGIES: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("per_word_remap", _per_word_remap),
    ("word_boundary_remap", _word_boundary_remap),
    ("direct", _direct),
    ("token_reconstruction", _token_reconstruction),
    ("bucket_reassembly", _bucket_reassembly),
)


def clean_plate(raw_text: Optional[str]) -> str:
    """
    Clean and format a license plate from voice input.

    Steps:
    1. Return canonical plates untouched
    2. Uppercase and apply phonetic corrections ("ABI" -> "AB", "SATU" -> "1")
    3. Drop punctuation, collapse whitespace
    4. Try each parsing strategy in turn, first prefix-valid match wins

    Args:
        raw_text: Raw recognized speech

    Returns:
        Canonical plate, or empty string if no valid plate was found
    """
    if raw_text is None:
        return ""
    text = str(raw_text)
    if not text.strip():
        return ""

    candidate = _match_plate(text.strip().upper())
    if candidate:
        return candidate.plate

    cleaned = _normalize_text(_apply_phonetic_substitutions(text.upper()))
    if not cleaned:
        return ""

    for name, strategy in STRATEGIES:
        attempt = strategy(cleaned)
        if not attempt:
            continue
        candidate = _match_plate(attempt)
        if candidate:
            logger.debug("Plate %s from %r via %s", candidate.plate, raw_text, name)
            return candidate.plate

    logger.debug("No valid plate in %r (cleaned %r)", raw_text, cleaned)
    return ""


def parse_plate(plate_text: Optional[str]) -> Optional[PlateCandidate]:
    """
    Split a plate into prefix, digits and suffix.

    Separators and case are ignored; no phonetic correction is applied.

    Returns:
        PlateCandidate, or None if the text is not a valid plate
    """
    if not plate_text:
        return None
    compact = re.sub(r'[^A-Z0-9]', '', str(plate_text).upper())
    return _match_plate(compact)


def is_valid_prefix(prefix: Optional[str]) -> bool:
    """Check if prefix is a known Indonesian regional code (any case)"""
    if not isinstance(prefix, str):
        return False
    return prefix.upper() in VALID_PREFIXES


def list_valid_prefixes() -> FrozenSet[str]:
    """All known regional prefixes"""
    return VALID_PREFIXES


def format_plate_display(plate_text: str) -> str:
    """
    Format plate for human-readable display.

    B1234ABC -> "B 1234 ABC", B2 -> "B 2". Anything that is not a valid
    plate comes back unchanged.
    """
    candidate = parse_plate(plate_text)
    if candidate is None:
        return plate_text
    return ' '.join(part for part in (candidate.prefix, candidate.digits, candidate.suffix) if part)
