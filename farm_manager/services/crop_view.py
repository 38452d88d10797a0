"""
Presentation helpers: summary counts, table sorting/filtering and row formatting
"""
from dataclasses import dataclass
from math import ceil
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from ..models.crop import CROP_STATUSES, HARVESTED, Crop
from ..utils.helpers import LABEL_DATE_FORMAT, clamp, parse_date, truncate_text

T = TypeVar("T")

STATUS_COLORS = {
    "planted": "blue",
    "growing": "green",
    "ready": "orange",
    "harvested": "purple",
}
DEFAULT_STATUS_COLOR = "gray"

TABLE_COLUMNS = ("Crop Name", "Type", "Status", "Planted Date", "Harvest Date", "Quantity", "Actions")

ASCEND = "ascend"
DESCEND = "descend"


@dataclass(frozen=True)
class CropStats:
    total: int = 0
    planted: int = 0
    growing: int = 0
    ready: int = 0
    harvested: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "planted": self.planted,
            "growing": self.growing,
            "ready": self.ready,
            "harvested": self.harvested,
        }


def status_color(status: Optional[str]) -> str:
    """Color scheme for a status badge; unknown statuses get the neutral color."""
    return STATUS_COLORS.get(status or "", DEFAULT_STATUS_COLOR)


def summarize(crops: Iterable[Crop]) -> CropStats:
    counts = {status: 0 for status in CROP_STATUSES}
    total = 0
    for crop in crops:
        total += 1
        if crop.status in counts:
            counts[crop.status] += 1
    return CropStats(total=total, **counts)


def filter_crops(crops: Iterable[Crop], types: Iterable[str] = (), statuses: Iterable[str] = ()) -> List[Crop]:
    """Keep crops matching any selected type AND any selected status; empty selections match all."""
    type_set = set(types)
    status_set = set(statuses)
    return [
        crop for crop in crops
        if (not type_set or crop.type in type_set)
        and (not status_set or crop.status in status_set)
    ]


def sort_by_name(crops: Iterable[Crop], order: Optional[str] = None) -> List[Crop]:
    rows = list(crops)
    if order not in (ASCEND, DESCEND):
        return rows
    return sorted(rows, key=lambda c: c.name.casefold(), reverse=(order == DESCEND))


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 1
    return max(1, ceil(total / page_size))


def paginate(rows: Sequence[T], page: int, page_size: int = 10) -> List[T]:
    """Rows for a 1-based page number; out-of-range pages are clamped."""
    if page_size <= 0:
        return list(rows)
    page = clamp(page, 1, page_count(len(rows), page_size))
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


def format_date_label(value: Optional[str]) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return "-"
    return parsed.strftime(LABEL_DATE_FORMAT)


def format_quantity(quantity: Optional[int]) -> str:
    return "-" if quantity is None else str(quantity)


def to_row(crop: Crop) -> Dict[str, str]:
    """Flatten a crop into the all-string row rendered by the table."""
    return {
        "id": crop.id,
        "name": crop.name,
        "type": crop.type,
        "status": crop.status,
        "status_label": crop.status.upper(),
        "status_color": status_color(crop.status),
        "planted_label": format_date_label(crop.planted_date),
        "harvest_label": format_date_label(crop.harvest_date),
        "quantity_label": format_quantity(crop.quantity),
        "notes": truncate_text(crop.notes or ""),
        "can_harvest": "false" if crop.status == HARVESTED else "true",
    }
