"""Utility functions for project-renamer."""

from .file_searcher import generate_search_path_list

__all__ = [
    "generate_search_path_list",
]
