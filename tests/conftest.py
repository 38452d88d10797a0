import pytest

from farm_manager.services.crop_store import CropStore
from farm_manager.services.crop_sync import CropSynchronizer


class FakeCropClient:
    """In-memory stand-in for the crop store that records every call."""

    def __init__(self, records=None):
        self.records = [dict(r) for r in (records or [])]
        self.calls = []
        self.fail_list = False
        self.fail_create = False
        self.fail_update = False
        self.list_response = None
        self._next_id = 100

    def list(self):
        self.calls.append(("list",))
        if self.fail_list:
            raise RuntimeError("network down")
        if self.list_response is not None:
            return self.list_response
        return {"success": True, "data": [dict(r) for r in self.records]}

    def create(self, fields):
        self.calls.append(("create", dict(fields)))
        if self.fail_create:
            raise RuntimeError("create rejected")
        self._next_id += 1
        record = {"_id": str(self._next_id), **fields}
        self.records.append(record)
        return record

    def update(self, crop_id, fields):
        self.calls.append(("update", crop_id, dict(fields)))
        if self.fail_update:
            raise RuntimeError("update rejected")
        for record in self.records:
            if record["_id"] == crop_id:
                record.update(fields)
                return record
        raise KeyError(crop_id)

    def mutations(self):
        return [c for c in self.calls if c[0] != "list"]


SAMPLE_RECORDS = [
    {"_id": "1", "name": "Tomatoes", "type": "Vegetable", "status": "growing",
     "plantedDate": "2024-03-05", "quantity": 48, "notes": "Cherry"},
    {"_id": "2", "name": "corn", "type": "Grain", "status": "growing", "plantedDate": "2024-04-12"},
    {"_id": "3", "name": "Wheat", "type": "Grain", "status": "ready",
     "plantedDate": "2023-10-20", "harvestDate": "2024-06-30"},
    {"_id": "4", "name": "Strawberries", "type": "Fruit", "status": "harvested"},
    {"_id": "5", "name": "Basil", "type": "Herb", "status": "planted", "quantity": 0},
]


@pytest.fixture
def client():
    return FakeCropClient(SAMPLE_RECORDS)


@pytest.fixture
def store():
    return CropStore()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def sync(client, store, notices):
    return CropSynchronizer(client, store, notices.append)
