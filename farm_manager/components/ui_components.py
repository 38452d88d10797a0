"""
UI Components for the Farm Manager Application

This module contains reusable UI components for the Farm Manager application.
"""

import reflex as rx

from ..models.crop import CROP_STATUSES, CROP_TYPES
from ..services.crop_view import STATUS_COLORS, TABLE_COLUMNS
from ..state import State


def header_component() -> rx.Component:
    """Header component with title and tagline."""
    return rx.center(
        rx.vstack(
            rx.heading("🌾 Farm Manager", size="8", weight="bold", color_scheme="green"),
            rx.text("Track your crops from seed to harvest", size="4", weight="light", color_scheme="green"),
            spacing="2",
            align="center",
        )
    )


def stat_card(label: str, value, color: str) -> rx.Component:
    """One summary counter."""
    return rx.card(
        rx.vstack(
            rx.heading(value, size="7", color_scheme=color),
            rx.text(label, size="2", color="gray"),
            align="center",
            spacing="1",
        ),
        width="100%",
    )


def stats_component() -> rx.Component:
    """Total and per-status counters."""
    return rx.grid(
        stat_card("Total Crops", State.stats["total"], "gray"),
        stat_card("Planted", State.stats["planted"], STATUS_COLORS["planted"]),
        stat_card("Growing", State.stats["growing"], STATUS_COLORS["growing"]),
        stat_card("Ready", State.stats["ready"], STATUS_COLORS["ready"]),
        stat_card("Harvested", State.stats["harvested"], STATUS_COLORS["harvested"]),
        columns="5",
        gap="4",
        width="100%",
        style={"gridTemplateColumns": "repeat(auto-fit, minmax(140px, 1fr))"},
    )


def filter_chip(label: str, selected, on_click) -> rx.Component:
    return rx.button(
        label,
        size="1",
        variant=rx.cond(selected, "solid", "outline"),
        on_click=on_click,
    )


def filter_bar_component() -> rx.Component:
    """Type and status filters; both apply together."""
    return rx.vstack(
        rx.hstack(
            rx.text("Type:", size="2", width="60px"),
            *[
                filter_chip(t, State.type_filters.contains(t), State.toggle_type_filter(t))
                for t in CROP_TYPES
            ],
            spacing="2",
            align="center",
            wrap="wrap",
        ),
        rx.hstack(
            rx.text("Status:", size="2", width="60px"),
            *[
                filter_chip(s.upper(), State.status_filters.contains(s), State.toggle_status_filter(s))
                for s in CROP_STATUSES
            ],
            rx.spacer(),
            rx.badge(
                rx.hstack(
                    rx.text(State.filtered_count),
                    rx.text(" shown"),
                    spacing="1",
                    align="center",
                ),
                color_scheme="green",
                high_contrast=False,
            ),
            rx.button("Clear filters", size="1", variant="ghost", on_click=State.clear_filters),
            spacing="2",
            align="center",
            wrap="wrap",
            width="100%",
        ),
        spacing="2",
        width="100%",
    )


def crop_row(row) -> rx.Component:
    """A table row with edit and harvest actions."""
    return rx.table.row(
        rx.table.cell(row["name"]),
        rx.table.cell(row["type"]),
        rx.table.cell(rx.badge(row["status_label"], color_scheme=row["status_color"])),
        rx.table.cell(row["planted_label"]),
        rx.table.cell(row["harvest_label"]),
        rx.table.cell(row["quantity_label"]),
        rx.table.cell(
            rx.hstack(
                rx.icon_button(
                    rx.icon("pencil", size=14),
                    size="1",
                    variant="soft",
                    title="Edit",
                    on_click=State.open_edit(row["id"]),
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=14),
                    size="1",
                    variant="soft",
                    color_scheme="purple",
                    title="Mark as harvested",
                    disabled=row["can_harvest"] == "false",
                    on_click=State.mark_harvested(row["id"]),
                ),
                spacing="2",
            )
        ),
    )


def table_header() -> rx.Component:
    name_col, *other_cols = TABLE_COLUMNS
    return rx.table.header(
        rx.table.row(
            rx.table.column_header_cell(
                rx.hstack(
                    rx.text(name_col),
                    rx.text(State.sort_indicator, size="1"),
                    spacing="1",
                    align="center",
                    cursor="pointer",
                    on_click=State.cycle_name_sort,
                )
            ),
            *[rx.table.column_header_cell(col) for col in other_cols],
        )
    )


def pagination_component() -> rx.Component:
    return rx.hstack(
        rx.button("‹", size="1", variant="outline", on_click=State.prev_page, disabled=State.page <= 1),
        rx.text(State.page, " / ", State.total_pages, size="2"),
        rx.button(
            "›",
            size="1",
            variant="outline",
            on_click=State.next_page,
            disabled=State.page >= State.total_pages,
        ),
        spacing="2",
        align="center",
        justify="end",
        width="100%",
    )


def crop_table_component() -> rx.Component:
    """Crop list card with the add button, filters, table and pagination."""
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.heading("Your Crops", size="5"),
                rx.spacer(),
                rx.icon_button(
                    rx.icon("refresh-cw", size=16),
                    variant="soft",
                    title="Reload crops",
                    on_click=State.refresh,
                ),
                rx.button(
                    rx.icon("plus", size=16),
                    "Add Crop",
                    color_scheme="green",
                    on_click=State.open_add,
                ),
                width="100%",
                align="center",
            ),
            filter_bar_component(),
            rx.cond(
                State.loading,
                rx.center(rx.spinner(size="3"), padding="40px", width="100%"),
                rx.table.root(
                    table_header(),
                    rx.table.body(rx.foreach(State.visible_rows, crop_row)),
                    width="100%",
                ),
            ),
            pagination_component(),
            spacing="4",
            width="100%",
        ),
        width="100%",
    )


def field_error(name: str) -> rx.Component:
    return rx.cond(
        State.form_errors.contains(name),
        rx.text(State.form_errors[name], color="red", size="1"),
        rx.box(),
    )


def form_field(label: str, control: rx.Component, name: str = "") -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        control,
        field_error(name) if name else rx.box(),
        spacing="1",
        width="100%",
    )


def crop_form_component() -> rx.Component:
    """Create/edit form fields."""
    return rx.vstack(
        form_field(
            "Crop Name",
            rx.input(
                placeholder="e.g., Tomatoes, Corn, Wheat",
                value=State.form_name,
                on_change=State.set_form_name,
                width="100%",
            ),
            "name",
        ),
        form_field(
            "Type",
            rx.select(
                list(CROP_TYPES),
                placeholder="Select crop type",
                value=State.form_type,
                on_change=State.set_form_type,
                width="100%",
            ),
            "type",
        ),
        form_field(
            "Status",
            rx.select(
                list(CROP_STATUSES),
                placeholder="Select status",
                value=State.form_status,
                on_change=State.set_form_status,
                width="100%",
            ),
            "status",
        ),
        rx.grid(
            form_field(
                "Planted Date",
                rx.el.input(
                    type="date",
                    value=State.form_planted_date,
                    on_change=State.set_form_planted_date,
                ),
            ),
            form_field(
                "Harvest Date",
                rx.el.input(
                    type="date",
                    value=State.form_harvest_date,
                    on_change=State.set_form_harvest_date,
                ),
            ),
            columns="2",
            gap="4",
            width="100%",
        ),
        form_field(
            "Quantity",
            rx.input(
                type="number",
                min=0,
                placeholder="Number of plants/seeds",
                value=State.form_quantity,
                on_change=State.set_form_quantity,
                width="100%",
            ),
            "quantity",
        ),
        form_field(
            "Notes",
            rx.text_area(
                placeholder="Additional notes about this crop...",
                rows="3",
                value=State.form_notes,
                on_change=State.set_form_notes,
                width="100%",
            ),
        ),
        rx.hstack(
            rx.button("Cancel", variant="soft", color_scheme="gray", on_click=State.close_modal),
            rx.button(State.submit_label, color_scheme="green", on_click=State.submit_form),
            spacing="2",
            justify="end",
            width="100%",
        ),
        spacing="3",
        width="100%",
    )


def crop_modal_component() -> rx.Component:
    """Modal wrapping the crop form."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(State.modal_title),
            crop_form_component(),
            max_width="520px",
        ),
        open=State.modal_visible,
        on_open_change=State.set_modal_open,
    )


def top_controls() -> rx.Component:
    """Top navigation controls."""
    return rx.color_mode.button(position="top-right", border_radius="12px")
