"""
Data synchronizer between the crop store client and the view state store

Every mutation is followed by a full re-fetch; nothing is merged locally and
nothing is retried.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

from ..models.crop import HARVESTED, Crop
from .crop_store import CropStore

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load crops"
SAVE_FAILED = "Failed to save crop"
HARVEST_FAILED = "Failed to update crop"
CREATED = "Crop added successfully"
UPDATED = "Crop updated successfully"
HARVESTED_OK = "Crop marked as harvested"


class EntityClient(Protocol):
    def list(self) -> Dict[str, Any]: ...

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]: ...

    def update(self, crop_id: str, fields: Dict[str, Any]) -> Dict[str, Any]: ...


@dataclass(frozen=True)
class Notice:
    """A transient user-facing message."""

    level: str
    message: str


class CropSynchronizer:
    """Issues list/create/update calls and reconciles results into the store."""

    def __init__(
        self,
        client: EntityClient,
        store: CropStore,
        notify: Optional[Callable[[Notice], None]] = None,
    ):
        self.client = client
        self.store = store
        self.notify = notify or (lambda notice: None)

    def _error(self, message: str):
        self.notify(Notice("error", message))

    def _success(self, message: str):
        self.notify(Notice("success", message))

    def load_all(self) -> bool:
        """Replace the list with the store's snapshot; keep the old list on any failure."""
        self.store.set_loading(True)
        try:
            response = self.client.list()
            if not isinstance(response, dict) or not response.get("success"):
                logger.warning(f"[CropSynchronizer.load_all] non-success response: {response!r}")
                self._error(LOAD_FAILED)
                return False
            data = response.get("data") or []
            if not isinstance(data, list):
                raise ValueError(f"expected a list of crops, got {type(data).__name__}")
            crops: List[Crop] = [Crop.from_dict(item) for item in data]
        except Exception as e:
            logger.warning(f"[CropSynchronizer.load_all] error: {e}")
            self._error(LOAD_FAILED)
            return False
        finally:
            self.store.set_loading(False)

        self.store.replace_crops(crops)
        logger.info(f"[CropSynchronizer.load_all] loaded {len(crops)} crops")
        return True

    def create(self, fields: Dict[str, Any]) -> bool:
        try:
            self.client.create(fields)
        except Exception as e:
            logger.warning(f"[CropSynchronizer.create] error: {e}")
            self._error(SAVE_FAILED)
            return False
        self._success(CREATED)
        self.load_all()
        return True

    def update(
        self,
        crop_id: str,
        fields: Dict[str, Any],
        failure_message: str = SAVE_FAILED,
        success_message: str = UPDATED,
    ) -> bool:
        try:
            self.client.update(crop_id, fields)
        except Exception as e:
            logger.warning(f"[CropSynchronizer.update] {crop_id} error: {e}")
            self._error(failure_message)
            return False
        self._success(success_message)
        self.load_all()
        return True

    def mark_harvested(self, crop_id: str) -> bool:
        """
        Force a crop's status to harvested.

        This is the only "delete" the app offers; the crop store has no delete
        operation. Already-harvested records are left alone.
        """
        crop = self.store.find(crop_id)
        if crop is not None and crop.is_harvested:
            logger.debug(f"[CropSynchronizer.mark_harvested] {crop_id} already harvested")
            return False
        return self.update(
            crop_id,
            {"status": HARVESTED},
            failure_message=HARVEST_FAILED,
            success_message=HARVESTED_OK,
        )
