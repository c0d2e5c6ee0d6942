import logging

from fastapi import FastAPI

from app.routers import hello, posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Markdown posts served from disk")

app.include_router(posts.router)
app.include_router(hello.router)


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
