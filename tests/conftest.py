import textwrap
from pathlib import Path

import pytest

from app.errors import PostNotFound
from app.models.content_file import ContentFile


def make_post(title: str, date: str, body: str = "Body text.", **extra) -> str:
    """Build the raw text of a post with a front-matter block."""
    lines = ["---", f'title: "{title}"', f'date: "{date}"']
    lines += [f"{key}: {value}" for key, value in extra.items()]
    lines += ["---", body]
    return "\n".join(lines) + "\n"


def write_file(root: Path, name: str, raw: str) -> Path:
    path = root / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    root = tmp_path / "posts"
    root.mkdir()
    return root


class FakeRepo:
    """
    In-memory stand-in for FilePostsRepo.
    Identifiers are listed in insertion order.
    """

    def __init__(self, raw_by_id: dict[str, str]):
        self.raw_by_id = raw_by_id
        self.reads = []

    def list_identifiers(self):
        return list(self.raw_by_id)

    def read(self, identifier: str) -> ContentFile:
        self.reads.append(identifier)
        if identifier not in self.raw_by_id:
            raise PostNotFound(identifier)
        return ContentFile(
            identifier=identifier,
            path=Path(f"/fake/{identifier}.md"),
            raw_text=textwrap.dedent(self.raw_by_id[identifier]).lstrip(),
        )


class FakeRenderer:
    """Renderer stand-in that records the bodies it was asked to render."""

    def __init__(self, html: str = "<p>rendered</p>"):
        self.html = html
        self.calls = []

    async def render(self, body: str, identifier=None) -> str:
        self.calls.append((identifier, body))
        return self.html


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self, list_posts_return=None, get_post_return=None, paths_return=None
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._paths_return = paths_return or []

    def list_posts(self):
        return self._list_posts_return

    def list_post_paths(self):
        return self._paths_return

    async def load_full(self, identifier: str):
        if self._get_post_return is None:
            raise PostNotFound(identifier)
        return self._get_post_return
