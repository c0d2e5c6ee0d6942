import logging
from typing import List

from app.schemas.blog import PostDetail, PostParams, PostPath, PostSummary
from app.services.front_matter import parse_front_matter
from app.services.markdown_renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, renderer: MarkdownRenderer | None = None):
        self.repo = repo
        self.renderer = renderer or MarkdownRenderer()

    def list_identifiers(self) -> List[str]:
        return self.repo.list_identifiers()

    def list_post_paths(self) -> List[PostPath]:
        """Routable detail pages, one per post."""
        return [
            PostPath(params=PostParams(id=identifier))
            for identifier in self.list_identifiers()
        ]

    def list_posts(self) -> List[PostSummary]:
        """
        Summaries of every post, newest first.

        Dates are compared as plain strings. Posts sharing a date have no
        guaranteed relative order. A single unreadable post fails the listing.
        """
        posts = [
            self.load_metadata(identifier) for identifier in self.list_identifiers()
        ]
        posts.sort(key=lambda post: post.date, reverse=True)
        logger.debug(f"Listed {len(posts)} posts")
        return posts

    def load_metadata(self, identifier: str) -> PostSummary:
        content_file = self.repo.read(identifier)
        metadata, _body = parse_front_matter(content_file.raw_text, identifier)
        return PostSummary(id=identifier, **metadata.model_dump())

    async def load_full(self, identifier: str) -> PostDetail:
        content_file = self.repo.read(identifier)
        metadata, body = parse_front_matter(content_file.raw_text, identifier)
        content_html = await self.renderer.render(body, identifier)
        return PostDetail(
            id=identifier, contentHtml=content_html, **metadata.model_dump()
        )
