from __future__ import annotations


class InvalidArgument(TypeError):
    # Raised when write_line is called with anything but exactly one UTF-8 encodable str.
    pass
