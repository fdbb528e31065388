"""
Speech Recognition Errors

Recognizer error codes and the Indonesian messages shown to the user.
"""

from enum import IntEnum
from typing import Optional, Union


class RecognitionErrorKind(IntEnum):
    """Recognizer failure codes (Android SpeechRecognizer numbering)"""
    NETWORK_TIMEOUT = 1
    NETWORK = 2
    AUDIO = 3
    SERVER = 4
    CLIENT = 5
    SPEECH_TIMEOUT = 6
    NO_MATCH = 7
    RECOGNIZER_BUSY = 8
    INSUFFICIENT_PERMISSIONS = 9


ERROR_MESSAGES = {
    RecognitionErrorKind.AUDIO: "Error audio. Periksa mikrofon Anda.",
    RecognitionErrorKind.CLIENT: "Error klien speech recognition.",
    RecognitionErrorKind.INSUFFICIENT_PERMISSIONS: "Izin mikrofon diperlukan.",
    RecognitionErrorKind.NETWORK: "Error jaringan. Periksa koneksi internet.",
    RecognitionErrorKind.NETWORK_TIMEOUT: "Timeout jaringan. Coba lagi.",
    RecognitionErrorKind.NO_MATCH: "Tidak ada suara yang dikenali. Coba ucapkan lebih jelas.",
    RecognitionErrorKind.RECOGNIZER_BUSY: "Speech recognizer sedang sibuk. Coba lagi.",
    RecognitionErrorKind.SERVER: "Error server speech recognition.",
    RecognitionErrorKind.SPEECH_TIMEOUT: "Tidak ada suara terdeteksi. Coba lagi.",
}

UNKNOWN_ERROR_MESSAGE = "Error speech recognition tidak dikenal."


def error_kind(code: Union[int, RecognitionErrorKind, None]) -> Optional[RecognitionErrorKind]:
    """Resolve a raw error code, None for codes we do not know"""
    try:
        return RecognitionErrorKind(code)
    except (TypeError, ValueError):
        return None


def error_message(code: Union[int, RecognitionErrorKind, None]) -> str:
    """
    Get the user-facing message for a recognizer error.

    Unknown codes get a generic message; this never raises.
    """
    kind = error_kind(code)
    if kind is None:
        return UNKNOWN_ERROR_MESSAGE
    return ERROR_MESSAGES[kind]
