from fastapi import APIRouter

from api.v1.routes.cities import router as cities_router
from api.v1.routes.heritage import router as heritage_router
from api.v1.routes.languages import router as languages_router

router = APIRouter()
router.include_router(languages_router)
router.include_router(cities_router)
router.include_router(heritage_router)
