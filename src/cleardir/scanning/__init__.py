"""Skanowanie struktur katalogów."""

from .filesystem_scanner import FileSystemDirectoryScanner, list_subdirectories
from .scanner import (
    DirectoryAccessError,
    DirectoryScanner,
    ProgressCallback,
    ScanCancelled,
    ScanError,
)

__all__ = [
    "DirectoryAccessError",
    "DirectoryScanner",
    "FileSystemDirectoryScanner",
    "ProgressCallback",
    "ScanCancelled",
    "ScanError",
    "list_subdirectories",
]
