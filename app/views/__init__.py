"""Views package — HTTP routes and text rendering."""

from app.views.presenter import render_summary
from app.views.routes import create_app

__all__ = ["create_app", "render_summary"]
