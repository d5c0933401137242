"""
FastAPI Routers Package

One router per resource; all are included in api/index.py.
Import routers from their modules (core.routers.products, ...).
"""
