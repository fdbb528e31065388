"""
Nopol Plate Normalization

Speech-to-plate cleaning, regional prefix validation and hypothesis selection.
"""

from nopol.plates.normalize import (
    clean_plate,
    parse_plate,
    is_valid_prefix,
    list_valid_prefixes,
    format_plate_display,
)
from nopol.plates.candidates import select_best_candidate, hypotheses_from_lists
from nopol.plates.prefixes import VALID_PREFIXES, region_for_prefix

__all__ = [
    'clean_plate',
    'parse_plate',
    'is_valid_prefix',
    'list_valid_prefixes',
    'format_plate_display',
    'select_best_candidate',
    'hypotheses_from_lists',
    'VALID_PREFIXES',
    'region_for_prefix',
]
