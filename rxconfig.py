import reflex as rx

config = rx.Config(
    app_name="farm_manager",
)
