"""Mini README: Core package initializer for SnapClassify.

SnapClassify runs an image classifier against a photo and renders the top
categories with their confidence as display text. The package root only
re-exports lightweight helpers so importing it stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
