"""
Entry point for the SecureInsure customer portal API.
Run with: uvicorn main:app --reload
"""
from portal.main import app

__all__ = ["app"]
