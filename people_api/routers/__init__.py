"""
FastAPI routers.

Each module builds an APIRouter that the app factory includes explicitly.
"""
