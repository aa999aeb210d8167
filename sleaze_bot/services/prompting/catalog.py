# sleaze_bot/services/prompting/catalog.py
from collections.abc import Iterator, Mapping
from types import MappingProxyType

import structlog

from sleaze_bot.data.constants import SUBJECT_PLACEHOLDER
from sleaze_bot.dto import TransformRequest

from .styles import DEFAULT_STYLE, STYLES

logger = structlog.get_logger(__name__)


class StyleCatalog(Mapping[str, str]):
    """
    Read-only mapping from style identifier to instruction template.

    Lookups never fail: an unknown identifier resolves to the default style.
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        default_style: str = DEFAULT_STYLE,
    ) -> None:
        self._templates = MappingProxyType(dict(templates if templates is not None else STYLES))
        if default_style not in self._templates:
            raise ValueError(f"Default style '{default_style}' is not part of the catalog.")
        self._default_style = default_style

    def __getitem__(self, key: str) -> str:
        return self._templates[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def default_style(self) -> str:
        return self._default_style

    @property
    def style_ids(self) -> list[str]:
        return list(self._templates)

    def resolve(self, style_key: str | None, subject: str | None = None) -> TransformRequest:
        """Looks up the style once and returns the immutable request for it."""
        requested = style_key or self._default_style
        resolved = requested if requested in self._templates else self._default_style
        if resolved != requested:
            logger.info(
                "Unknown style requested, using default",
                requested_style=requested,
                default_style=resolved,
            )
        return TransformRequest(
            style_key=requested,
            resolved_key=resolved,
            instruction=self.render(self._templates[resolved], subject),
        )

    @staticmethod
    def render(template: str, subject: str | None = None) -> str:
        """
        Fills the subject placeholder of a template.

        Without a subject the template is returned verbatim, placeholder
        included; the generation service reads it as "the person in the image".
        """
        if subject is None:
            return template
        return template.replace(SUBJECT_PLACEHOLDER, subject)
