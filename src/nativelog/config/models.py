from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class OutputConfig(BaseModel):
    # Output section selects where written lines go (stdout descriptor by default).
    model_config = ConfigDict(extra="forbid")
    kind: Literal["fd", "file"] = "fd"
    fd: int = Field(default=1, ge=0)
    path: str | None = None
    append: bool = True

    @model_validator(mode="after")
    def _path_required_for_file(self) -> "OutputConfig":
        if self.kind == "file" and not self.path:
            raise ValueError("output.path is required when output.kind is file")
        return self


class LoggingConfig(BaseModel):
    # Diagnostics go to stderr or a JSONL file, never to the output sink.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    path: str | None = None
    level: Literal["debug", "info", "warning", "error"] = "info"

    @model_validator(mode="after")
    def _path_required_for_jsonl(self) -> "LoggingConfig":
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when logging.sink is jsonl")
        return self


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    version: Literal[1] = 1
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
