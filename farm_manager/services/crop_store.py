"""
View state store for the crop list, loading flag and modal binding
"""
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from ..models.crop import Crop


@dataclass(frozen=True)
class StoreSnapshot:
    crops: Tuple[Crop, ...] = ()
    loading: bool = True
    modal_visible: bool = False
    editing_id: Optional[str] = None


class CropStore:
    """Single owner of the in-memory crop list and view flags.

    Reads go through snapshot(); writes go through the mutation methods. The
    list is only ever replaced wholesale.
    """

    def __init__(self):
        self._state = StoreSnapshot()

    def snapshot(self) -> StoreSnapshot:
        return self._state

    def _apply(self, **changes) -> StoreSnapshot:
        self._state = replace(self._state, **changes)
        return self._state

    def replace_crops(self, crops: Iterable[Crop]) -> StoreSnapshot:
        return self._apply(crops=tuple(crops))

    def set_loading(self, loading: bool) -> StoreSnapshot:
        return self._apply(loading=bool(loading))

    def open_modal(self, editing_id: Optional[str] = None) -> StoreSnapshot:
        return self._apply(modal_visible=True, editing_id=editing_id)

    def close_modal(self) -> StoreSnapshot:
        if not self._state.modal_visible and self._state.editing_id is None:
            return self._state
        return self._apply(modal_visible=False, editing_id=None)

    def find(self, crop_id: str) -> Optional[Crop]:
        for crop in self._state.crops:
            if crop.id == crop_id:
                return crop
        return None
