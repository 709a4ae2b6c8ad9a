"""Application services coordinating domain rules with injected collaborators."""

from .library_service import LibraryService

__all__ = ["LibraryService"]
