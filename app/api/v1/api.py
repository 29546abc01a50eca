from fastapi import APIRouter

from app.api.v1.routers import dramas_router, posts_router

router = APIRouter(prefix="/api/v1")
router.include_router(posts_router.router, prefix="/posts", tags=["posts"])
router.include_router(dramas_router.router, prefix="/dramas", tags=["dramas"])
