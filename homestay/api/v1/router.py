from fastapi import APIRouter

from homestay.api.v1.endpoints.health import router as health_router


router = APIRouter(prefix="/v1")
router.include_router(health_router, tags=["health"])
