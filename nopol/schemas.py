"""
Nopol Schema Definitions

Data structures passed between the plate normalizer, the speech layer and
the voice-search flow.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
from enum import Enum


def _to_confidence(value: Any) -> float:
    """Coerce a recognizer score into [0.0, 1.0]; junk becomes 0.0"""
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if score != score:  # NaN
        return 0.0
    return min(1.0, max(0.0, score))


class SearchType(str, Enum):
    """Vehicle search key types"""
    NOPOL = "nopol"  # license plate
    NOKA = "noka"  # chassis number
    NOSIN = "nosin"  # engine number


@dataclass(frozen=True)
class PlateCandidate:
    """A plate split into its grammar parts"""
    prefix: str
    digits: str
    suffix: str = ""  # empty for a partial plate

    @property
    def plate(self) -> str:
        return f"{self.prefix}{self.digits}{self.suffix}"

    @property
    def is_partial(self) -> bool:
        return not self.suffix


@dataclass
class RecognitionResult:
    """One speech recognition hypothesis"""
    text: str
    confidence: float = 0.0  # 0.0 - 1.0

    def __post_init__(self):
        if self.text is None:
            self.text = ""
        self.text = str(self.text)
        self.confidence = _to_confidence(self.confidence)

    @classmethod
    def coerce(cls, value: Any) -> "RecognitionResult":
        """
        Build a result from the shapes recognizers hand back.

        Accepts a RecognitionResult, a (text, confidence) pair, a dict with
        "text" and optional "confidence", or a bare string.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(text=value.get("text", ""), confidence=value.get("confidence", 0.0))
        if isinstance(value, (tuple, list)):
            text = value[0] if len(value) > 0 else ""
            confidence = value[1] if len(value) > 1 else 0.0
            return cls(text=text, confidence=confidence)
        return cls(text=value)


@dataclass(frozen=True)
class BestCandidate:
    """Winning hypothesis: what was heard and what it was read as"""
    raw_text: str
    cleaned_plate: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SearchQuery:
    """Query handed to the vehicle search service"""
    search_type: SearchType
    search_value: str
    source: str = "keyboard"  # "keyboard" or "voice"

    def __post_init__(self):
        if not self.search_value or not self.search_value.strip():
            raise ValueError("search_value must not be blank")
        # Accept plain strings for the type
        object.__setattr__(self, "search_type", SearchType(self.search_type))

    def to_dict(self) -> Dict[str, str]:
        return {
            "search_type": self.search_type.value,
            "search_value": self.search_value,
            "source": self.source,
        }


@dataclass(frozen=True)
class VoiceSearchOutcome:
    """Result of one voice search attempt"""
    recognized_text: str = ""
    query: Optional[SearchQuery] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.query is not None

    @property
    def interpreted_plate(self) -> Optional[str]:
        return self.query.search_value if self.query else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "recognized_text": self.recognized_text,
            "interpreted_plate": self.interpreted_plate,
            "query": self.query.to_dict() if self.query else None,
            "error_message": self.error_message,
        }
