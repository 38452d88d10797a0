"""
External API clients.
"""

from .crop_client import CropClient, CropClientError, CropNotFoundError

__all__ = ["CropClient", "CropClientError", "CropNotFoundError"]
