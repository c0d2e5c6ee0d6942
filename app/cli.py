import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from app.errors import PostStoreError
from app.repos.posts_repo import FilePostsRepo
from app.services.markdown_renderer import MarkdownRenderer
from app.services.posts_service import PostsService
from app.services.site_exporter import SiteExporter
from app.settings import settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="Pre-render markdown posts as JSON.", add_completion=False)


@app.command()
def export(
    output: Annotated[
        Optional[Path],
        typer.Argument(help="Directory to write the exported site into."),
    ] = None,
    posts_dir: Annotated[
        Optional[Path],
        typer.Option("--posts", help="Content directory to read posts from."),
    ] = None,
) -> None:
    """Export the post listing and every post as JSON documents."""
    output_dir = output or Path(settings.EXPORT_DIRECTORY)
    repo = FilePostsRepo(
        posts_dir or settings.posts_path, extensions=settings.post_extensions
    )
    service = PostsService(
        repo=repo, renderer=MarkdownRenderer(settings.MARKDOWN_EXTENSIONS)
    )

    try:
        written = asyncio.run(SiteExporter(service).export(output_dir))
    except PostStoreError as e:
        logger.error(f"Export failed: {e}")
        typer.echo(f"Export failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Wrote {len(written)} files to {output_dir}")


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app()
