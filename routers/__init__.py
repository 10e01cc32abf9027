# routers/__init__.py

from fastapi import APIRouter

# Auth + session
from .auth import router as auth_router
from .schools import router as schools_router
from .dashboard import router as dashboard_router

# Page-gated data
from .maintenance import router as maintenance_router
from .reports import router as reports_router
from .appointments import router as appointments_router
from .documents import router as documents_router
from .contacts import router as contacts_router
from .financial import router as financial_router
from .buildings import router as buildings_router
from .objects import router as objects_router

# Beheer
from .admin import router as admin_router


# Everything the web client calls; mounted under /api in main.py
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(schools_router)
api_router.include_router(dashboard_router)

api_router.include_router(maintenance_router)
api_router.include_router(reports_router)
api_router.include_router(appointments_router)
api_router.include_router(documents_router)
api_router.include_router(contacts_router)
api_router.include_router(financial_router)
api_router.include_router(buildings_router)
api_router.include_router(objects_router)

api_router.include_router(admin_router)

__all__ = ["api_router"]
