"""
Form controller for creating and editing crop records
"""
import logging
from datetime import date
from typing import Any, Dict, Optional, Union

from ..models.crop import CROP_STATUSES, CROP_TYPES, Crop, CropDraft
from ..utils.helpers import format_date, parse_date, safe_int
from .crop_sync import CropSynchronizer

logger = logging.getLogger(__name__)

CREATE = "create"
EDIT = "edit"

REQUIRED_MESSAGES = {
    "name": "Please enter crop name",
    "type": "Please select crop type",
    "status": "Please select status",
}
DATE_FIELDS = ("planted_date", "harvest_date")
TEXT_FIELDS = ("name", "type", "status", "quantity", "notes")


class FormController:
    """Two-mode form state: create (unbound) or edit (bound to a crop id)."""

    def __init__(self):
        self.mode: Optional[str] = None
        self.crop_id: Optional[str] = None
        self.draft = CropDraft()
        self.errors: Dict[str, str] = {}

    @property
    def is_open(self) -> bool:
        return self.mode is not None

    def open_create(self):
        self.mode = CREATE
        self.crop_id = None
        self.draft = CropDraft()
        self.errors = {}

    def open_edit(self, crop: Crop):
        """Bind to an existing record and pre-populate every field from it."""
        self.mode = EDIT
        self.crop_id = crop.id
        self.draft = CropDraft(
            name=crop.name,
            type=crop.type,
            status=crop.status,
            planted_date=parse_date(crop.planted_date),
            harvest_date=parse_date(crop.harvest_date),
            quantity="" if crop.quantity is None else str(crop.quantity),
            notes=crop.notes or "",
        )
        self.errors = {}

    def close(self):
        self.mode = None
        self.crop_id = None

    def update_field(self, name: str, value: Union[str, date, None]):
        """Set one draft field; date fields take YYYY-MM-DD text or a date."""
        if name in DATE_FIELDS:
            setattr(self.draft, name, parse_date(value))
        elif name in TEXT_FIELDS:
            setattr(self.draft, name, "" if value is None else str(value))
        else:
            raise KeyError(f"unknown crop form field: {name}")
        self.errors.pop(name, None)

    def validate(self) -> Dict[str, str]:
        """Return field -> message for every invalid field (empty when valid)."""
        errors: Dict[str, str] = {}
        for field_name, message in REQUIRED_MESSAGES.items():
            if not getattr(self.draft, field_name).strip():
                errors[field_name] = message
        if "type" not in errors and self.draft.type not in CROP_TYPES:
            errors["type"] = REQUIRED_MESSAGES["type"]
        if "status" not in errors and self.draft.status not in CROP_STATUSES:
            errors["status"] = REQUIRED_MESSAGES["status"]
        if self.draft.quantity.strip():
            qty = safe_int(self.draft.quantity)
            if qty is None or qty < 0:
                errors["quantity"] = "Quantity must be a whole number of zero or more"
        return errors

    def payload(self) -> Dict[str, Any]:
        """
        The merged field set handed to the synchronizer.

        Unset dates are always left out. In edit mode quantity and notes are
        always sent (None and "" when cleared).
        """
        fields: Dict[str, Any] = {
            "name": self.draft.name.strip(),
            "type": self.draft.type,
            "status": self.draft.status,
        }
        planted = format_date(self.draft.planted_date)
        if planted:
            fields["plantedDate"] = planted
        harvest = format_date(self.draft.harvest_date)
        if harvest:
            fields["harvestDate"] = harvest
        qty = safe_int(self.draft.quantity)
        notes = self.draft.notes.strip()
        if self.mode == EDIT:
            # A cleared input clears the stored value on a partial update
            fields["quantity"] = qty
            fields["notes"] = notes
            return fields
        if qty is not None:
            fields["quantity"] = qty
        if notes:
            fields["notes"] = notes
        return fields

    def submit(self, sync: CropSynchronizer) -> bool:
        """
        Validate, then create or update depending on the mode.

        Validation failure records the errors and never reaches the client.
        A failed save keeps the form open with the draft untouched; a
        successful one closes the form.
        """
        self.errors = self.validate()
        if self.errors:
            logger.debug(f"[FormController.submit] invalid fields: {sorted(self.errors)}")
            return False

        fields = self.payload()
        if self.mode == EDIT and self.crop_id is not None:
            ok = sync.update(self.crop_id, fields)
        else:
            ok = sync.create(fields)
        if ok:
            self.close()
        return ok
