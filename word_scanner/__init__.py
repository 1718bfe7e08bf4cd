from .errors import PastBounds, ScannerError, WordDoesNotExist
from .scanner import WORD_DELIMITERS, Cursor, Scanner, is_delimiter

__all__ = [
    "Cursor",
    "PastBounds",
    "Scanner",
    "ScannerError",
    "WORD_DELIMITERS",
    "WordDoesNotExist",
    "is_delimiter",
]
