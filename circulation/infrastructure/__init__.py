"""Infrastructure layer - concrete collaborators for the library service."""

from .factories import InMemoryLibrary, create_in_memory_library

__all__ = ["InMemoryLibrary", "create_in_memory_library"]
