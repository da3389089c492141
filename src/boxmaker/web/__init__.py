"""FastAPI REST API for box generation.

Usage:
    uvicorn boxmaker.web:app --reload
"""

from boxmaker.web.app import app, create_app

__all__ = ["app", "create_app"]
