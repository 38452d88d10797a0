"""
Crop services: view state store, synchronizer, form controller and presentation.
"""

from .crop_form import FormController
from .crop_page import CropPage
from .crop_store import CropStore, StoreSnapshot
from .crop_sync import CropSynchronizer, Notice
from .crop_view import CropStats, filter_crops, paginate, sort_by_name, summarize, to_row

__all__ = [
    "CropPage",
    "CropStats",
    "CropStore",
    "CropSynchronizer",
    "FormController",
    "Notice",
    "StoreSnapshot",
    "filter_crops",
    "paginate",
    "sort_by_name",
    "summarize",
    "to_row",
]
