"""WSGI entrypoint for Gunicorn."""

import logging

from app.controllers.processing_controller import ProcessingController
from app.views.routes import create_app
from config import get_settings

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
controller = ProcessingController(settings)
app = create_app(controller)
