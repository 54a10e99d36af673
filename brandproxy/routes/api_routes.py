from fastapi import APIRouter
from brandproxy.routes.brandfetch_routes import brandfetch_router



router = APIRouter(prefix="/api")
router.include_router(brandfetch_router, prefix="/brandfetch", tags=["brandfetch"])
