"""
Farm Manager Application State Module

This module contains the main Reflex State class for the Farm Manager
application. The crop list, counters, table controls and the create/edit form
are owned by a CropPage; every handler delegates to it and then publishes its
view into the frontend vars.
"""

import logging
from typing import Iterable, Optional

import reflex as rx

from ..api.crop_client import CropClient
from ..config import settings
from ..services.crop_form import DATE_FIELDS
from ..services.crop_page import CropPage
from ..services.crop_sync import Notice

logger = logging.getLogger(__name__)

# Initialize service client
crop_client = CropClient(settings.api_url, token=settings.api_token, timeout=settings.api_timeout)


def _toast(notice: Notice):
    if notice.level == "error":
        return rx.toast.error(notice.message)
    return rx.toast.success(notice.message)


class State(rx.State):
    """Crop list, counters, filters and the crop form."""

    loading: bool = True
    stats: dict[str, int] = {"total": 0, "planted": 0, "growing": 0, "ready": 0, "harvested": 0}
    visible_rows: list[dict[str, str]] = []
    filtered_count: int = 0
    total_pages: int = 1

    # Modal / form binding
    modal_visible: bool = False
    editing_id: str = ""
    form_name: str = ""
    form_type: str = ""
    form_status: str = ""
    form_planted_date: str = ""  # YYYY-MM-DD from <input type="date">
    form_harvest_date: str = ""
    form_quantity: str = ""
    form_notes: str = ""
    form_errors: dict[str, str] = {}

    # Table controls
    type_filters: list[str] = []
    status_filters: list[str] = []
    name_sort: str = ""
    sort_indicator: str = ""
    page: int = 1

    # Backend-only owner of the page state
    _page: Optional[CropPage] = None

    def _crop_page(self) -> CropPage:
        if self._page is None:
            self._page = CropPage(crop_client, page_size=settings.page_size)
        return self._page

    def _publish(self, notices: Iterable[Notice] = ()):
        """Copy the page view into the frontend vars and turn notices into toasts."""
        for name, value in self._crop_page().view().items():
            setattr(self, name, value)
        return [_toast(n) for n in notices]

    @rx.var
    def modal_title(self) -> str:
        return "Edit Crop" if self.editing_id else "Add New Crop"

    @rx.var
    def submit_label(self) -> str:
        return "Update Crop" if self.editing_id else "Add Crop"

    # ---- lifecycle ----

    def on_load(self):
        """Fetch the full crop list when the page mounts."""
        page = self._crop_page()
        page.begin_load()
        self._publish()
        yield
        for event in self._publish(page.load()):
            yield event

    def refresh(self):
        return self._publish(self._crop_page().load())

    # ---- modal / form ----

    def open_add(self):
        """Open the form in create mode with every field cleared."""
        self._crop_page().open_add()
        self._publish()

    def open_edit(self, crop_id: str):
        """Open the form in edit mode bound to one record."""
        return self._publish(self._crop_page().open_edit(crop_id))

    def close_modal(self):
        self._crop_page().close()
        self._publish()

    def set_modal_open(self, is_open: bool):
        """Dialog open-state callback (escape key, overlay click)."""
        if not is_open:
            self._crop_page().close()
        self._publish()

    def _set_field(self, name: str, value: str):
        self._crop_page().set_field(name, value)
        self._publish()

    def set_form_name(self, value: str):
        self._set_field("name", value)

    def set_form_type(self, value: str):
        self._set_field("type", value)

    def set_form_status(self, value: str):
        self._set_field("status", value)

    def set_form_planted_date(self, value: str):
        self._set_field(DATE_FIELDS[0], value)

    def set_form_harvest_date(self, value: str):
        self._set_field(DATE_FIELDS[1], value)

    def set_form_quantity(self, value: str):
        self._set_field("quantity", value)

    def set_form_notes(self, value: str):
        self._set_field("notes", value)

    def submit_form(self):
        """Validate and save; the modal stays open when anything fails."""
        return self._publish(self._crop_page().submit())

    # ---- row actions ----

    def mark_harvested(self, crop_id: str):
        """Mark a crop as harvested; disabled in the table once it already is."""
        return self._publish(self._crop_page().mark_harvested(crop_id))

    # ---- table controls ----

    def toggle_type_filter(self, value: str):
        self._crop_page().toggle_type_filter(value)
        self._publish()

    def toggle_status_filter(self, value: str):
        self._crop_page().toggle_status_filter(value)
        self._publish()

    def clear_filters(self):
        self._crop_page().clear_filters()
        self._publish()

    def cycle_name_sort(self):
        self._crop_page().cycle_name_sort()
        self._publish()

    def next_page(self):
        self._crop_page().next_page()
        self._publish()

    def prev_page(self):
        self._crop_page().prev_page()
        self._publish()
