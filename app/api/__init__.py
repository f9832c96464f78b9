"""API routes, mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api import admin, admissions, auth, contacts, health, news

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(news.router, prefix="/news", tags=["news"])
router.include_router(admissions.router, prefix="/admissions", tags=["admissions"])
router.include_router(contacts.router, prefix="/contact", tags=["contact"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
