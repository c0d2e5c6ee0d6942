import datetime
import logging
from typing import Any, Optional, Tuple

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError
from yaml.constructor import ConstructorError

from app.errors import MetadataParseError
from app.schemas.blog import PostMetadata

logger = logging.getLogger(__name__)

FENCE = "---"
RESERVED_KEYS = ("id", "contentHtml")

_handler = YAMLHandler()


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            try:
                repeated = key in seen
            except TypeError:
                # unhashable keys are reported by SafeLoader itself
                continue
            if repeated:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def split_front_matter(
    raw_text: str, identifier: Optional[str] = None
) -> Tuple[Optional[str], str]:
    """
    Split a post into (metadata block, body).

    The block must open on the very first line with a line of exactly ``---``
    and ends at the next such line. Returns ``(None, raw_text)`` when the file
    has no opening fence.
    """
    text = raw_text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FENCE:
        return None, text

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip("\r\n") == FENCE:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    raise MetadataParseError(identifier, "metadata block is not closed")


def parse_front_matter(
    raw_text: str, identifier: Optional[str] = None
) -> Tuple[PostMetadata, str]:
    """Parse the metadata block of a post and return it with the markdown body."""
    block, body = split_front_matter(raw_text, identifier)
    if block is None:
        raise MetadataParseError(identifier, "missing metadata block")

    try:
        loaded = _handler.load(block, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise MetadataParseError(identifier, f"invalid YAML ({exc})") from exc
    except ValueError as exc:
        # impossible timestamps such as 2023-13-45
        raise MetadataParseError(identifier, f"invalid value ({exc})") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise MetadataParseError(
            identifier, f"expected key: value pairs, got {type(loaded).__name__}"
        )

    metadata = {str(key): _convert_date(value) for key, value in loaded.items()}
    for key in RESERVED_KEYS:
        if metadata.pop(key, None) is not None:
            logger.debug(f"Ignoring reserved metadata key {key!r} in {identifier}")

    try:
        return PostMetadata.model_validate(metadata), body
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise MetadataParseError(identifier, f"invalid fields: {fields}") from exc


def _convert_date(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
