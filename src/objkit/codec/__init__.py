from objkit.codec.errors import ParseError, SerializationError
from objkit.codec.json_codec import from_text, parse_text, to_text

__all__ = ["to_text", "from_text", "parse_text", "ParseError", "SerializationError"]
