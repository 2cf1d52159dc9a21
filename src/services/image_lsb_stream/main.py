"""
Main entry point for the adaptive LSB steganography service

This file provides the router that can be included in the main FastAPI application.
"""

from .api.routes import router

__all__ = ["router"]
