"""
API router aggregator — wires all endpoint modules together.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, categories, contact, gallery, health, products

api_router = APIRouter()

# Session auth (login, logout, current user)
api_router.include_router(auth.router)

# Catalog
api_router.include_router(categories.router)
api_router.include_router(products.router)
api_router.include_router(gallery.router)

# Contact form, health
api_router.include_router(contact.router)
api_router.include_router(health.router)
