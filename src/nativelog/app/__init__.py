from .cli import apply_overrides, build_parser, parse_args, run
from .runtime import Runtime, build_runtime

# app package exports CLI helpers for reuse in tests and entrypoints.
__all__ = ["Runtime", "apply_overrides", "build_parser", "build_runtime", "parse_args", "run"]
