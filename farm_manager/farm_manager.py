"""
Farm Manager - crop lifecycle tracker
Main application file
"""

import reflex as rx

from .config import configure_logging, settings
from .state import State
from .components import (
    header_component,
    stats_component,
    crop_table_component,
    crop_modal_component,
    top_controls
)

configure_logging(settings)


def index() -> rx.Component:
    """Main page component."""
    return rx.container(
        top_controls(),
        header_component(),
        rx.spacer(height="20px"),
        stats_component(),
        rx.spacer(height="20px"),
        crop_table_component(),
        crop_modal_component(),
        size="4",
    )


# App styling
style = {
    rx.text: {
        "font_family": "Figtree",
    },
    rx.heading: {
        "font_family": "Figtree",
    }
}

# Create and configure the app
app = rx.App(style=style)
app.add_page(index, title="Farm Manager", on_load=State.on_load)
