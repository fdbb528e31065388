"""
Speech Recognizer Settings

Request parameters tuned for Indonesian plate dictation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from nopol.config import NopolConfig, get_config


@dataclass(frozen=True)
class RecognitionSettings:
    """Parameters sent with each recognition request"""
    language_model: str = "web_search"
    language: str = "id-ID"
    language_preference: str = "id-ID"
    calling_package: str = "nopol"
    max_results: int = 5
    complete_silence_ms: int = 2000
    possibly_complete_silence_ms: int = 2000
    minimum_length_ms: int = 1500
    prefer_offline: bool = False
    audio_source: str = "mic"

    def __post_init__(self):
        if self.max_results < 1:
            raise ValueError(f"max_results must be >= 1, got {self.max_results}")

    @classmethod
    def from_config(cls, config: Optional[NopolConfig] = None) -> "RecognitionSettings":
        config = config or get_config()
        return cls(
            language=config.speech_language,
            language_preference=config.speech_language,
            max_results=config.speech_max_results,
        )

    def to_extras(self) -> Dict[str, Any]:
        """Flat key/value extras for a recognizer request"""
        return {
            "language_model": self.language_model,
            "language": self.language,
            "language_preference": self.language_preference,
            "calling_package": self.calling_package,
            "max_results": self.max_results,
            "speech_input_complete_silence_length_millis": self.complete_silence_ms,
            "speech_input_possibly_complete_silence_length_millis": self.possibly_complete_silence_ms,
            "speech_input_minimum_length_millis": self.minimum_length_ms,
            "prefer_offline": self.prefer_offline,
            "audio_source": self.audio_source,
        }
