import pytest

from farm_manager.models.crop import Crop
from farm_manager.services.crop_view import (
    ASCEND,
    DESCEND,
    filter_crops,
    format_date_label,
    format_quantity,
    page_count,
    paginate,
    sort_by_name,
    status_color,
    summarize,
    to_row,
)

from conftest import SAMPLE_RECORDS


@pytest.fixture
def crops():
    return [Crop.from_dict(r) for r in SAMPLE_RECORDS]


def test_summary_counts_add_up(crops):
    stats = summarize(crops)
    assert stats.total == 5
    assert (stats.planted, stats.growing, stats.ready, stats.harvested) == (1, 2, 1, 1)
    assert stats.planted + stats.growing + stats.ready + stats.harvested == stats.total


def test_summary_of_empty_list():
    assert summarize([]).as_dict() == {"total": 0, "planted": 0, "growing": 0, "ready": 0, "harvested": 0}


def test_filters_intersect(crops):
    result = filter_crops(crops, types={"Grain"}, statuses={"growing"})
    assert [c.id for c in result] == ["2"]


def test_filter_order_does_not_matter(crops):
    by_type_first = filter_crops(filter_crops(crops, types={"Grain"}), statuses={"growing"})
    by_status_first = filter_crops(filter_crops(crops, statuses={"growing"}), types={"Grain"})
    assert by_type_first == by_status_first == filter_crops(crops, {"Grain"}, {"growing"})


def test_empty_filters_match_everything(crops):
    assert filter_crops(crops) == crops


def test_multi_value_filter(crops):
    result = filter_crops(crops, types={"Herb", "Fruit"})
    assert {c.id for c in result} == {"4", "5"}


def test_sort_by_name_does_not_mutate(crops):
    original = list(crops)
    asc = sort_by_name(crops, ASCEND)
    assert [c.name for c in asc] == ["Basil", "corn", "Strawberries", "Tomatoes", "Wheat"]
    assert [c.name for c in sort_by_name(crops, DESCEND)] == list(reversed([c.name for c in asc]))
    assert sort_by_name(crops, None) == original
    assert crops == original


def test_status_color_falls_back_for_unknown():
    assert status_color("ready") == "orange"
    assert status_color("composted") == "gray"
    assert status_color(None) == "gray"


def test_pagination():
    rows = list(range(23))
    assert page_count(len(rows), 10) == 3
    assert page_count(0, 10) == 1
    assert paginate(rows, 3, 10) == [20, 21, 22]
    assert paginate(rows, 99, 10) == [20, 21, 22]
    assert paginate(rows, 0, 10) == list(range(10))


def test_labels():
    assert format_date_label("2024-03-05") == "Mar 05, 2024"
    assert format_date_label(None) == "-"
    assert format_date_label("not a date") == "-"
    assert format_quantity(None) == "-"
    assert format_quantity(0) == "0"


def test_row_marks_harvested_as_not_harvestable(crops):
    rows = {c.id: to_row(c) for c in crops}
    assert rows["4"]["can_harvest"] == "false"
    assert rows["1"]["can_harvest"] == "true"
    assert rows["1"]["status_label"] == "GROWING"
    assert rows["1"]["status_color"] == "green"
    assert rows["4"]["quantity_label"] == "-"
