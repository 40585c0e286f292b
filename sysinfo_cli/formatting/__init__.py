from .json_format import render_json, to_jsonable
from .text import TextFormatter
from .units import format_bytes, format_temperature

__all__ = [
    "TextFormatter",
    "format_bytes",
    "format_temperature",
    "render_json",
    "to_jsonable",
]
