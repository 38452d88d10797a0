"""
Crop data model.
"""

from .crop import CROP_STATUSES, CROP_TYPES, HARVESTED, Crop, CropDraft

__all__ = [
    "CROP_STATUSES",
    "CROP_TYPES",
    "HARVESTED",
    "Crop",
    "CropDraft",
]
