from datetime import date

import pytest

from farm_manager.models.crop import Crop


def test_from_dict_reads_wire_shape():
    crop = Crop.from_dict({
        "_id": "abc",
        "name": "Tomatoes",
        "type": "Vegetable",
        "status": "growing",
        "plantedDate": "2024-03-05",
        "quantity": "12",
    })
    assert crop.id == "abc"
    assert crop.planted_date == date(2024, 3, 5)
    assert crop.harvest_date is None
    assert crop.quantity == 12
    assert crop.notes is None
    assert not crop.is_harvested


def test_from_dict_accepts_plain_id():
    crop = Crop.from_dict({"id": 7, "name": "Basil", "type": "Herb", "status": "harvested"})
    assert crop.id == "7"
    assert crop.is_harvested


def test_blank_optionals_are_absent():
    crop = Crop.from_dict({"_id": "1", "name": "Corn", "type": "Grain", "status": "planted",
                           "plantedDate": "", "quantity": "", "notes": "  "})
    assert (crop.planted_date, crop.quantity, crop.notes) == (None, None, None)


def test_unknown_status_still_loads():
    crop = Crop.from_dict({"_id": "1", "name": "Corn", "type": "Grain", "status": "composted"})
    assert crop.status == "composted"


@pytest.mark.parametrize("payload", [
    None,
    [],
    "crop",
    {"name": "no id", "type": "Grain"},
    {"_id": "", "type": "Grain"},
    {"_id": "1", "type": "Tree"},
    {"_id": "1", "type": "Grain", "plantedDate": "2024-13-40"},
])
def test_from_dict_rejects_malformed(payload):
    with pytest.raises(ValueError):
        Crop.from_dict(payload)


@pytest.mark.parametrize("quantity", ["lots", 3.7, -5])
def test_from_dict_rejects_bad_quantity(quantity):
    with pytest.raises(ValueError):
        Crop.from_dict({"_id": "b", "name": "Beans", "type": "Legume", "status": "planted",
                        "quantity": quantity})


def test_to_fields_omits_absent_optionals():
    crop = Crop(id="1", name="Corn", type="Grain", status="planted", quantity=0)
    assert crop.to_fields() == {"name": "Corn", "type": "Grain", "status": "planted", "quantity": 0}


def test_to_fields_uses_wire_names_and_text_dates():
    crop = Crop.from_dict({"_id": "3", "name": "Wheat", "type": "Grain", "status": "ready",
                           "plantedDate": "2023-10-20", "harvestDate": "2024-06-30"})
    fields = crop.to_fields()
    assert fields["plantedDate"] == "2023-10-20"
    assert fields["harvestDate"] == "2024-06-30"
    assert "id" not in fields and "_id" not in fields
