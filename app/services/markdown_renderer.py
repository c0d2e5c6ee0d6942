import asyncio
import logging
from typing import Iterable, Optional

import markdown
import nh3

from app.errors import RenderError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("fenced_code", "tables")

# nh3's defaults cover the markdown subset; fenced code also needs its class.
ALLOWED_ATTRIBUTES = {
    tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()
}
ALLOWED_ATTRIBUTES.setdefault("code", set()).add("class")


class MarkdownRenderer:
    """Converts markdown bodies to sanitized HTML with Python-Markdown and nh3."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        self.extensions = list(extensions)

    def render_sync(self, body: str, identifier: Optional[str] = None) -> str:
        # A fresh Markdown instance per call keeps conversions independent.
        try:
            md = markdown.Markdown(extensions=self.extensions, output_format="html")
            html = nh3.clean(
                md.convert(body), attributes=ALLOWED_ATTRIBUTES, link_rel=None
            )
        except Exception as e:
            raise RenderError(identifier, str(e) or type(e).__name__) from e
        logger.debug(f"Rendered {len(body)} chars of markdown for {identifier}")
        return html

    async def render(self, body: str, identifier: Optional[str] = None) -> str:
        return await asyncio.to_thread(self.render_sync, body, identifier)
