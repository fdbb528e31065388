"""
Speech Hypothesis Selection

Picks the hypothesis that yields a valid plate with the best confidence.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence

from nopol.plates.normalize import clean_plate
from nopol.schemas import BestCandidate, RecognitionResult


logger = logging.getLogger(__name__)


def hypotheses_from_lists(
    texts: Sequence[str],
    confidence_scores: Optional[Sequence[float]] = None
) -> List[RecognitionResult]:
    """
    Pair recognized texts with their confidence scores.

    Recognizers report texts and scores as parallel lists, and the score
    list may be missing or shorter than the text list. Missing scores
    count as 0.0.
    """
    scores = list(confidence_scores or [])
    return [
        RecognitionResult(
            text=text,
            confidence=scores[index] if index < len(scores) else 0.0
        )
        for index, text in enumerate(texts or [])
    ]


def select_best_candidate(hypotheses: Iterable[Any]) -> Optional[BestCandidate]:
    """
    Choose the best plate among alternative transcriptions.

    Hypotheses that do not clean to a plate are skipped. Among the rest the
    highest confidence wins; on equal confidence the earlier one is kept.

    Args:
        hypotheses: RecognitionResult objects, (text, confidence) pairs,
            {"text", "confidence"} dicts or plain strings

    Returns:
        BestCandidate with the original and cleaned text, or None if no
        hypothesis produced a valid plate
    """
    best: Optional[BestCandidate] = None
    best_confidence = 0.0

    for hypothesis in hypotheses or []:
        result = RecognitionResult.coerce(hypothesis)
        cleaned = clean_plate(result.text)
        if not cleaned:
            continue

        if best is None or result.confidence > best_confidence:
            best = BestCandidate(raw_text=result.text, cleaned_plate=cleaned)
            best_confidence = result.confidence

    if best is None:
        logger.info("No valid plate among speech hypotheses")
    else:
        logger.debug("Selected %r -> %s (confidence %.2f)", best.raw_text, best.cleaned_plate, best_confidence)
    return best
