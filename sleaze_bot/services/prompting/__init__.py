from .catalog import StyleCatalog
from .styles import DEFAULT_STYLE, STYLES

__all__ = [
    "DEFAULT_STYLE",
    "STYLES",
    "StyleCatalog",
]
