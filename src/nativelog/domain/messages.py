from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgument


@dataclass(frozen=True, slots=True)
class Message:
    # Message lives for one write_line call only; nothing retains it afterwards.
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidArgument(f"message must be str, got {type(self.text).__name__}")

    @property
    def encoded(self) -> bytes:
        # Strict UTF-8: lone surrogates are a contract violation, not replaced.
        try:
            return self.text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"message is not representable as UTF-8: {exc.reason}") from exc

    @property
    def byte_length(self) -> int:
        return len(self.encoded)

    def to_line(self) -> bytes:
        # Message bytes plus exactly one trailing newline; embedded newlines are kept as-is.
        return self.encoded + b"\n"
