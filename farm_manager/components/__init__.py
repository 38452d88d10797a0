"""
UI Components module for the Farm Manager application.
"""

from .ui_components import (
    header_component,
    stats_component,
    filter_bar_component,
    crop_table_component,
    crop_form_component,
    crop_modal_component,
    top_controls
)

__all__ = [
    "header_component",
    "stats_component",
    "filter_bar_component",
    "crop_table_component",
    "crop_form_component",
    "crop_modal_component",
    "top_controls"
]
