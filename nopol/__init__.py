"""
Nopol - Voice Input Normalization for Indonesian License Plates

Cleans speech recognition output into canonical plates ("nomor polisi"),
validated against the regional prefix table, and prepares voice searches.
"""

__version__ = "1.0.0"

from nopol.schemas import (
    PlateCandidate,
    RecognitionResult,
    BestCandidate,
    SearchType,
    SearchQuery,
    VoiceSearchOutcome,
)
from nopol.plates import (
    clean_plate,
    select_best_candidate,
    is_valid_prefix,
    list_valid_prefixes,
)

__all__ = [
    "PlateCandidate",
    "RecognitionResult",
    "BestCandidate",
    "SearchType",
    "SearchQuery",
    "VoiceSearchOutcome",
    "clean_plate",
    "select_best_candidate",
    "is_valid_prefix",
    "list_valid_prefixes",
]
