"""Warstwa orkiestracji wyszukiwania katalogów."""

from . import models
from .application_manager import ApplicationManager
from .cancellation import CancellationKind, CancellationSignals
from .search_service import DirectorySearchService

__all__ = [
	"models",
	"ApplicationManager",
	"CancellationKind",
	"CancellationSignals",
	"DirectorySearchService",
]
