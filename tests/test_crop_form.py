from datetime import date

import pytest

from farm_manager.models.crop import Crop
from farm_manager.services.crop_form import CREATE, EDIT, FormController


@pytest.fixture
def form():
    return FormController()


def fill(form, **values):
    for name, value in values.items():
        form.update_field(name, value)


def test_open_create_clears_fields(form):
    form.open_edit(Crop(id="1", name="Corn", type="Grain", status="planted"))
    form.open_create()
    assert form.mode == CREATE
    assert form.crop_id is None
    assert form.draft.name == ""
    assert form.draft.planted_date is None


def test_open_edit_prepopulates_and_parses_dates(form):
    crop = Crop(id="3", name="Wheat", type="Grain", status="ready",
                planted_date="2023-10-20", quantity=5, notes="North field")
    form.open_edit(crop)
    assert form.mode == EDIT
    assert form.crop_id == "3"
    assert form.draft.planted_date == date(2023, 10, 20)
    assert form.draft.harvest_date is None
    assert form.draft.quantity == "5"
    assert form.draft.notes == "North field"


def test_empty_name_blocks_submit_without_client_calls(form, sync, client):
    form.open_create()
    fill(form, type="Grain", status="planted")
    assert form.submit(sync) is False
    assert "name" in form.errors
    assert client.calls == []
    assert form.is_open


def test_required_fields_reported_together(form):
    form.open_create()
    assert set(form.validate()) == {"name", "type", "status"}


def test_unknown_enum_values_rejected(form):
    form.open_create()
    fill(form, name="Rice", type="Tree", status="rotting")
    assert set(form.validate()) == {"type", "status"}


@pytest.mark.parametrize("qty", ["-1", "2.5", "lots"])
def test_bad_quantity_rejected(form, qty):
    form.open_create()
    fill(form, name="Rice", type="Grain", status="planted", quantity=qty)
    assert set(form.validate()) == {"quantity"}


def test_editing_a_field_clears_its_error(form, sync):
    form.open_create()
    form.submit(sync)
    assert "name" in form.errors
    form.update_field("name", "Rice")
    assert "name" not in form.errors


def test_unknown_field_raises(form):
    with pytest.raises(KeyError):
        form.update_field("colour", "red")


def test_create_payload_serializes_dates_and_omits_unset(form, sync, client):
    form.open_create()
    fill(form, name=" Peas ", type="Legume", status="planted",
         planted_date="2024-04-01", quantity="30")
    assert form.submit(sync) is True
    assert client.calls[0] == ("create", {
        "name": "Peas",
        "type": "Legume",
        "status": "planted",
        "plantedDate": "2024-04-01",
        "quantity": 30,
    })
    assert not form.is_open


def test_unchanged_edit_round_trips_dates(form, sync, client):
    sync.load_all()
    crop = sync.store.find("3")
    form.open_edit(crop)
    assert form.submit(sync) is True
    _, crop_id, fields = client.mutations()[0]
    assert crop_id == "3"
    assert fields["plantedDate"] == "2023-10-20"
    assert fields["harvestDate"] == "2024-06-30"


def test_failed_save_keeps_form_open_with_values(form, sync, client):
    client.fail_create = True
    form.open_create()
    fill(form, name="Peas", type="Legume", status="planted", notes="Trellis")
    assert form.submit(sync) is False
    assert form.is_open
    assert form.mode == CREATE
    assert form.draft.name == "Peas"
    assert form.draft.notes == "Trellis"


def test_date_field_accepts_date_objects_and_blank(form):
    form.open_create()
    form.update_field("harvest_date", date(2024, 9, 1))
    assert form.draft.harvest_date == date(2024, 9, 1)
    form.update_field("harvest_date", "")
    assert form.draft.harvest_date is None


def test_edit_sends_cleared_quantity_and_notes(form, sync, client):
    sync.load_all()
    form.open_edit(sync.store.find("1"))
    fill(form, quantity="", notes="")
    assert form.submit(sync) is True
    _, crop_id, fields = client.mutations()[0]
    assert crop_id == "1"
    assert fields["quantity"] is None
    assert fields["notes"] == ""
    refreshed = sync.store.find("1")
    assert refreshed.quantity is None
    assert refreshed.notes is None


def test_edit_omits_cleared_dates(form, sync, client):
    sync.load_all()
    form.open_edit(sync.store.find("3"))
    fill(form, harvest_date="")
    form.submit(sync)
    _, _, fields = client.mutations()[0]
    assert "harvestDate" not in fields
    assert fields["plantedDate"] == "2023-10-20"
