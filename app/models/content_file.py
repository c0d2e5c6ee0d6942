from pathlib import Path

from pydantic import BaseModel


class ContentFile(BaseModel):
    """Raw markdown file as found in the content directory."""

    identifier: str
    path: Path
    raw_text: str
