"""High level services that orchestrate the application workflow."""

from .finder import WordFinder
from .resolver import ResolverDependencies, WordResolver

__all__ = ["ResolverDependencies", "WordFinder", "WordResolver"]
