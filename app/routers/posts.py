import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.errors import PostNotFound, StoreUnavailable
from app.schemas.blog import PostDetail, PostPath, PostSummary
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except StoreUnavailable as e:
        logger.error(f"Post store unavailable: {e}")
        raise HTTPException(status_code=503, detail="Post store unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/paths", response_model=List[PostPath])
def list_post_paths(service: PostsService = Depends(deps.get_posts_service)):
    """Get the identifiers of every routable post page."""
    try:
        return service.list_post_paths()
    except StoreUnavailable as e:
        logger.error(f"Post store unavailable: {e}")
        raise HTTPException(status_code=503, detail="Post store unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing post paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{post_id}", response_model=PostDetail)
async def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with its rendered HTML."""
    try:
        return await service.load_full(post_id)
    except HTTPException:
        raise
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except StoreUnavailable as e:
        logger.error(f"Post store unavailable: {e}")
        raise HTTPException(status_code=503, detail="Post store unavailable")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
