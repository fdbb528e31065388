"""
Voice Search Flow

Turns the outcome of one recognition request into either a plate search
query or a message telling the user what went wrong.
"""

import logging
from typing import Optional, Sequence

from nopol.plates.candidates import hypotheses_from_lists, select_best_candidate
from nopol.plates.normalize import clean_plate
from nopol.schemas import SearchQuery, SearchType, VoiceSearchOutcome
from nopol.speech.errors import error_message


logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "Tidak ada teks yang dikenali"
INVALID_PLATE_MESSAGE = "Format nomor polisi tidak valid. Contoh: B1234ABC"
NO_VALID_HYPOTHESIS_MESSAGE = "Format nomor polisi tidak valid. Contoh: B2, AB123, B1234ABC"
CANCELLED_MESSAGE = "Pengenalan suara dibatalkan"


def process_spoken_text(spoken_text: Optional[str]) -> VoiceSearchOutcome:
    """
    Build a plate search from a single transcription.

    Args:
        spoken_text: Text as heard by the recognizer

    Returns:
        VoiceSearchOutcome with a nopol query, or an error message
    """
    if not spoken_text or not spoken_text.strip():
        return VoiceSearchOutcome(error_message=NO_TEXT_MESSAGE)

    cleaned = clean_plate(spoken_text)
    if not cleaned:
        return VoiceSearchOutcome(
            recognized_text=spoken_text,
            error_message=INVALID_PLATE_MESSAGE,
        )

    return VoiceSearchOutcome(
        recognized_text=spoken_text,
        query=SearchQuery(
            search_type=SearchType.NOPOL,
            search_value=cleaned,
            source="voice",
        ),
    )


def handle_recognition(
    texts: Optional[Sequence[str]] = None,
    confidence_scores: Optional[Sequence[float]] = None,
    error_code: Optional[int] = None,
    cancelled: bool = False,
) -> VoiceSearchOutcome:
    """
    Handle the full result of a recognition request.

    Cancellation wins over an error code, and an error code wins over any
    texts that came with it.

    Args:
        texts: Alternative transcriptions, best first as reported
        confidence_scores: Scores parallel to texts, may be missing
        error_code: Recognizer error code, None on success
        cancelled: User dismissed the recognizer

    Returns:
        VoiceSearchOutcome
    """
    if cancelled:
        return VoiceSearchOutcome(error_message=CANCELLED_MESSAGE)

    if error_code is not None:
        message = error_message(error_code)
        logger.info("Speech recognition failed with code %s: %s", error_code, message)
        return VoiceSearchOutcome(error_message=message)

    texts = list(texts or [])
    best = select_best_candidate(hypotheses_from_lists(texts, confidence_scores))
    if best is None:
        # Echo the top transcription so the user sees what was heard
        return VoiceSearchOutcome(
            recognized_text=(texts[0] or "") if texts else "",
            error_message=NO_VALID_HYPOTHESIS_MESSAGE,
        )

    return process_spoken_text(best.raw_text)
