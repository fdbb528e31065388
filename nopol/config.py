"""
Nopol Configuration

Logging, API and speech recognizer settings read from the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class NopolConfig:
    """Configuration for the nopol service"""

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None  # None logs to console only
    timezone: str = "Asia/Jakarta"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])

    # Speech recognizer
    speech_language: str = "id-ID"
    speech_max_results: int = 5

    @classmethod
    def from_env(cls) -> "NopolConfig":
        """Create config from environment variables"""
        return cls(
            log_level=os.getenv("NOPOL_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("NOPOL_LOG_DIR") or None,
            timezone=os.getenv("NOPOL_TIMEZONE", "Asia/Jakarta"),
            api_host=os.getenv("NOPOL_API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("NOPOL_API_PORT", "8000")),
            cors_origins=_split_origins(
                os.getenv("NOPOL_CORS_ORIGINS", "http://localhost:5173")
            ),
            speech_language=os.getenv("NOPOL_SPEECH_LANGUAGE", "id-ID"),
            speech_max_results=int(os.getenv("NOPOL_SPEECH_MAX_RESULTS", "5")),
        )


# Global config instance
_config_instance: Optional[NopolConfig] = None


def get_config() -> NopolConfig:
    """Get or create global config instance"""
    global _config_instance
    if _config_instance is None:
        _config_instance = NopolConfig.from_env()
    return _config_instance
