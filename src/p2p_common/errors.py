"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Event shape
  2xxx: Tag parsing
  9xxx: System

These never escape the codec: decode converts them into a failed Result.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Event shape ---

class UnsupportedEventKindError(AppError):
    def __init__(self, kind: int) -> None:
        self.kind = kind
        super().__init__(1001, f"Event is not a classified listing or trade offer: kind={kind}")


# --- 2xxx: Tag parsing ---

class TagParseError(AppError):
    def __init__(self, tag: str, raw: str, expected: str) -> None:
        self.tag = tag
        self.raw = raw
        super().__init__(2001, f"Invalid {expected} in '{tag}' tag: {raw!r}")


# --- 9xxx: System ---

class OfferDecodeError(AppError):
    def __init__(self, detail: str = "Failed to parse offer from event") -> None:
        super().__init__(9001, detail)
