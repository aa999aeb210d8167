# sleaze_bot/services/prompting/styles/__init__.py
"""
Style registry for the transform pipeline.

Each style lives in its own module and exposes a single PROMPT_* template.
Templates may mention the uploaded person through the `[CHARACHTER]` token.

To add a new style:
1. Create a new .py file in this directory defining the template constant.
2. Add it to the `STYLES` dictionary below. The key is the style identifier
   clients send in the `style` form field.
"""
from .flex import PROMPT_FLEX
from .group import PROMPT_GROUP
from .megasleaze import PROMPT_MEGASLEAZE
from .shadow import PROMPT_SHADOW
from .sleaze1 import PROMPT_SLEAZE1
from .sleaze2 import PROMPT_SLEAZE2
from .sleaze3 import PROMPT_SLEAZE3
from .sleazify import PROMPT_SLEAZIFY
from .ultrasleaze import PROMPT_ULTRASLEAZE

DEFAULT_STYLE = "sleaze1"

# Insertion order is the order styles are advertised in /health.
STYLES: dict[str, str] = {
    "sleaze1": PROMPT_SLEAZE1,
    "sleaze2": PROMPT_SLEAZE2,
    "sleaze3": PROMPT_SLEAZE3,
    "shadow": PROMPT_SHADOW,
    "sleazify": PROMPT_SLEAZIFY,
    "megasleaze": PROMPT_MEGASLEAZE,
    "ultrasleaze": PROMPT_ULTRASLEAZE,
    "group": PROMPT_GROUP,
    "flex": PROMPT_FLEX,
}

__all__ = [
    "DEFAULT_STYLE",
    "STYLES",
]
