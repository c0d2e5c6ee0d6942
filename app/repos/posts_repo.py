import logging
from pathlib import Path
from typing import Dict, Iterable, List

from app.errors import (
    IdentifierCollision,
    MetadataParseError,
    PostNotFound,
    StoreUnavailable,
)
from app.models.content_file import ContentFile

logger = logging.getLogger(__name__)


class FilePostsRepo:
    """Markdown posts stored as flat files in a single content directory."""

    def __init__(self, root: Path, extensions: Iterable[str] = (".md",)):
        self.root = Path(root)
        self.extensions = tuple(extensions)

    def list_identifiers(self) -> List[str]:
        """
        Identifiers of every post file, in directory enumeration order.
        Raises IdentifierCollision when two files strip to the same identifier.
        """
        files = self._scan()
        return list(files)

    def read(self, identifier: str) -> ContentFile:
        path = self._locate(identifier)
        try:
            raw_text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise PostNotFound(identifier) from exc
        except UnicodeDecodeError as exc:
            raise MetadataParseError(identifier, "not valid UTF-8") from exc
        except OSError as exc:
            raise StoreUnavailable(self.root, f"unreadable ({exc})") from exc
        logger.debug(f"Read {len(raw_text)} chars for post {identifier}")
        return ContentFile(identifier=identifier, path=path, raw_text=raw_text)

    def _scan(self) -> Dict[str, Path]:
        if not self.root.is_dir():
            raise StoreUnavailable(self.root)
        try:
            entries = list(self.root.iterdir())
        except OSError as exc:
            raise StoreUnavailable(self.root, f"unreadable ({exc})") from exc

        found: Dict[str, Path] = {}
        for entry in entries:
            identifier = self._identifier_for(entry)
            if identifier is None or not entry.is_file():
                continue
            if identifier in found:
                raise IdentifierCollision(identifier, [found[identifier], entry])
            found[identifier] = entry

        logger.debug(f"Found {len(found)} posts in {self.root}")
        return found

    def _locate(self, identifier: str) -> Path:
        if not self._is_safe(identifier):
            raise PostNotFound(identifier)
        if not self.root.is_dir():
            raise StoreUnavailable(self.root)

        candidates = [
            self.root / f"{identifier}{ext}"
            for ext in self.extensions
            if (self.root / f"{identifier}{ext}").is_file()
        ]
        if not candidates:
            raise PostNotFound(identifier)
        if len(candidates) > 1:
            raise IdentifierCollision(identifier, candidates)
        return candidates[0]

    def _identifier_for(self, path: Path) -> str | None:
        suffix = path.suffix
        if suffix not in self.extensions or path.name.startswith("."):
            return None
        return path.name[: -len(suffix)]

    @staticmethod
    def _is_safe(identifier: str) -> bool:
        return bool(identifier) and not (
            "/" in identifier or "\\" in identifier or identifier.startswith(".")
        )
