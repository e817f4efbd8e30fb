"""Application services."""

from pathhelper.application.services.path_service import PathListService

__all__ = ["PathListService"]
