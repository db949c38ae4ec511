"""Services package — API client with local fallback."""

from app.services.processor_client import ClientOutcome, ProcessorClient

__all__ = ["ClientOutcome", "ProcessorClient"]
