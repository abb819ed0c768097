from nativelog.domain.errors import InvalidArgument
from nativelog.usecases.write_line import LineWriter, write_line

# Host-facing surface: write_line is the one exported entry point.
__all__ = ["InvalidArgument", "LineWriter", "write_line"]
