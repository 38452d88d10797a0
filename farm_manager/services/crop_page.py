"""
Page controller behind the Reflex state

Owns the view state store, the form controller and the table controls, and
flattens them into the plain values the Reflex state publishes.
"""
import logging
from typing import Any, Callable, Dict, List

from ..models.crop import Crop
from ..utils.helpers import clamp
from .crop_form import FormController
from .crop_store import CropStore
from .crop_sync import CropSynchronizer, EntityClient, Notice
from .crop_view import (
    ASCEND,
    DESCEND,
    filter_crops,
    page_count,
    paginate,
    sort_by_name,
    summarize,
    to_row,
)

logger = logging.getLogger(__name__)

SORT_CYCLE = {"": ASCEND, ASCEND: DESCEND, DESCEND: ""}
SORT_INDICATORS = {ASCEND: "▲", DESCEND: "▼"}
NOT_FOUND = "Crop not found; refresh the list"


def _toggle(values: List[str], value: str) -> List[str]:
    if value in values:
        return [v for v in values if v != value]
    return values + [value]


class CropPage:
    """Everything one browser session sees on the crop page."""

    def __init__(self, client: EntityClient, page_size: int = 10):
        self.client = client
        self.store = CropStore()
        self.form = FormController()
        self.type_filters: List[str] = []
        self.status_filters: List[str] = []
        self.name_sort = ""
        self.page = 1
        self.page_size = page_size

    def _run(self, action: Callable[[CropSynchronizer], bool]) -> List[Notice]:
        notices: List[Notice] = []
        action(CropSynchronizer(self.client, self.store, notices.append))
        self._clamp_page()
        return notices

    # ---- data ----

    def begin_load(self):
        self.store.set_loading(True)

    def load(self) -> List[Notice]:
        return self._run(lambda sync: sync.load_all())

    def mark_harvested(self, crop_id: str) -> List[Notice]:
        return self._run(lambda sync: sync.mark_harvested(crop_id))

    # ---- modal / form ----

    def open_add(self):
        self.form.open_create()
        self.store.open_modal(None)

    def open_edit(self, crop_id: str) -> List[Notice]:
        crop = self.store.find(crop_id)
        if crop is None:
            logger.warning(f"[CropPage.open_edit] unknown crop id {crop_id}")
            return [Notice("error", NOT_FOUND)]
        self.form.open_edit(crop)
        self.store.open_modal(crop.id)
        return []

    def close(self):
        self.form.close()
        self.store.close_modal()

    def set_field(self, name: str, value: Any):
        self.form.update_field(name, value)

    def submit(self) -> List[Notice]:
        """Save the form; the modal closes only when the save succeeded."""
        notices: List[Notice] = []
        ok = self.form.submit(CropSynchronizer(self.client, self.store, notices.append))
        if ok:
            self.store.close_modal()
        self._clamp_page()
        return notices

    # ---- table controls ----

    def toggle_type_filter(self, value: str):
        self.type_filters = _toggle(self.type_filters, value)
        self.page = 1

    def toggle_status_filter(self, value: str):
        self.status_filters = _toggle(self.status_filters, value)
        self.page = 1

    def clear_filters(self):
        self.type_filters = []
        self.status_filters = []
        self.page = 1

    def cycle_name_sort(self):
        """Cycle the name column through ascending, descending and unsorted."""
        self.name_sort = SORT_CYCLE.get(self.name_sort, "")

    def next_page(self):
        if self.page < self.total_pages():
            self.page += 1

    def prev_page(self):
        if self.page > 1:
            self.page -= 1

    # ---- derived ----

    def table_rows(self) -> List[Crop]:
        records = filter_crops(self.store.snapshot().crops, self.type_filters, self.status_filters)
        return sort_by_name(records, self.name_sort or None)

    def total_pages(self) -> int:
        return page_count(len(self.table_rows()), self.page_size)

    def _clamp_page(self):
        self.page = clamp(self.page, 1, self.total_pages())

    def view(self) -> Dict[str, Any]:
        """Every value the Reflex state publishes to the browser."""
        snap = self.store.snapshot()
        rows = self.table_rows()
        draft = self.form.draft
        return {
            "loading": snap.loading,
            "modal_visible": snap.modal_visible,
            "editing_id": snap.editing_id or "",
            "stats": summarize(snap.crops).as_dict(),
            "filtered_count": len(rows),
            "total_pages": page_count(len(rows), self.page_size),
            "visible_rows": [to_row(c) for c in paginate(rows, self.page, self.page_size)],
            "type_filters": list(self.type_filters),
            "status_filters": list(self.status_filters),
            "name_sort": self.name_sort,
            "sort_indicator": SORT_INDICATORS.get(self.name_sort, ""),
            "page": self.page,
            "form_name": draft.name,
            "form_type": draft.type,
            "form_status": draft.status,
            "form_planted_date": draft.planted_date.isoformat() if draft.planted_date else "",
            "form_harvest_date": draft.harvest_date.isoformat() if draft.harvest_date else "",
            "form_quantity": draft.quantity,
            "form_notes": draft.notes,
            "form_errors": dict(self.form.errors),
        }
