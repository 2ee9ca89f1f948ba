from .parsing import extract_json_block, parse_json_object, to_number, clamp, coerce_number

__all__ = [
    "extract_json_block",
    "parse_json_object",
    "to_number",
    "clamp",
    "coerce_number",
]
