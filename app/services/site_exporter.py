import asyncio
import logging
import shutil
from pathlib import Path
from typing import List

from pydantic import TypeAdapter

from app.schemas.blog import PostDetail, PostPath, PostSummary
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

_listing_adapter = TypeAdapter(List[PostSummary])
_paths_adapter = TypeAdapter(List[PostPath])


class SiteExporter:
    """
    Pre-renders the blog into JSON documents:

        index.json        listing, newest first
        paths.json        one entry per detail page
        posts/<id>.json   full post with rendered HTML
    """

    def __init__(self, service: PostsService):
        self.service = service

    async def export(self, output_dir: Path) -> List[Path]:
        output_dir = Path(output_dir)
        listing = self.service.list_posts()
        paths = self.service.list_post_paths()
        details = await asyncio.gather(
            *(self.service.load_full(path.params.id) for path in paths)
        )

        posts_dir = output_dir / "posts"
        # posts removed from the store must not linger from a previous export
        if posts_dir.exists():
            shutil.rmtree(posts_dir)
        posts_dir.mkdir(parents=True)

        written = [
            _write(output_dir / "index.json", _listing_adapter.dump_json(listing)),
            _write(output_dir / "paths.json", _paths_adapter.dump_json(paths)),
        ]
        for detail in details:
            written.append(_write_detail(posts_dir, detail))

        logger.info(f"Exported {len(details)} posts to {output_dir}")
        return written


def _write_detail(posts_dir: Path, detail: PostDetail) -> Path:
    return _write(posts_dir / f"{detail.id}.json", detail.model_dump_json(indent=2))


def _write(path: Path, payload: str | bytes) -> Path:
    if isinstance(payload, bytes):
        path.write_bytes(payload)
    else:
        path.write_text(payload, encoding="utf-8")
    return path
