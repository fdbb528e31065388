"""
Nopol Speech Layer

Error messages and request settings for the external speech recognizer.
"""

from nopol.speech.errors import RecognitionErrorKind, error_kind, error_message
from nopol.speech.settings import RecognitionSettings

__all__ = [
    'RecognitionErrorKind',
    'error_kind',
    'error_message',
    'RecognitionSettings',
]
