from fastapi import Depends

from app.repos.posts_repo import FilePostsRepo
from app.services.markdown_renderer import MarkdownRenderer
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(
        current_settings.posts_path, extensions=current_settings.post_extensions
    )


def get_markdown_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(extensions=current_settings.MARKDOWN_EXTENSIONS)


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_markdown_renderer),
):
    return PostsService(repo=repo, renderer=renderer)
