from .errors import InvalidArgument
from .messages import Message

# Public domain exports keep imports explicit across layers.
__all__ = ["InvalidArgument", "Message"]
