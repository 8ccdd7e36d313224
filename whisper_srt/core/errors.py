"""Failure kinds raised by the conversion core.

WHY: A bad transcript must abort that file with a message the user can act
on. The CLI reports the failure *kind* by name, so each condition gets its
own exception class instead of a bare ValueError with a string.

RULES:
- Both classes subclass ValueError, so generic callers can still catch
  ValueError.
- An empty transcript is NOT an error; it produces empty output.
- The core never repairs bad timing data; it raises one of these.
"""


class TranscriptError(ValueError):
    """Base class for conversion failures."""

    kind = "TranscriptError"

    def __str__(self) -> str:
        return "{}: {}".format(self.kind, super().__str__())


class MalformedInput(TranscriptError):
    """The transcript is structurally inconsistent (e.g. text without words)."""

    kind = "MalformedInput"


class InvalidTimestamp(TranscriptError):
    """A time value is negative or not finite."""

    kind = "InvalidTimestamp"
