"""Controllers package."""

from app.controllers.processing_controller import ProcessingController

__all__ = ["ProcessingController"]
