"""Mini README: Interactive interfaces for SnapClassify.

Exports the FastAPI application factory; the Typer CLI lives in
``main_classifier.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
