"""FastAPI REST API for rectangle packing.

Usage:
    uvicorn maxrects.web:app --reload
"""

from maxrects.web.app import app, create_app

__all__ = ["app", "create_app"]
