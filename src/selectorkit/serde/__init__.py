from selectorkit.serde.json_codec import ParseError, from_json, to_json

__all__ = ["ParseError", "from_json", "to_json"]
