from pathlib import Path
from typing import Optional, Sequence


class PostStoreError(Exception):
    """Base class for failures while reading posts from the content store."""


class StoreUnavailable(PostStoreError):
    def __init__(self, root: Path, reason: str = "missing or unreadable"):
        self.root = root
        super().__init__(f"Post store {root} is {reason}")


class PostNotFound(PostStoreError):
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Post not found: {identifier}")


class MetadataParseError(PostStoreError):
    def __init__(self, identifier: Optional[str], reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid metadata block in {identifier}: {reason}")


class RenderError(PostStoreError):
    def __init__(self, identifier: Optional[str], reason: str):
        self.identifier = identifier
        super().__init__(f"Failed to render {identifier}: {reason}")


class IdentifierCollision(PostStoreError):
    """Two or more content files map to the same identifier."""

    def __init__(self, identifier: str, paths: Sequence[Path]):
        self.identifier = identifier
        self.paths = list(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Identifier {identifier!r} is shared by: {names}")
