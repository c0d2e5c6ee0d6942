from fastapi import APIRouter

router = APIRouter()


@router.get("/api/hello")
async def hello():
    return {"text": "Hello"}
