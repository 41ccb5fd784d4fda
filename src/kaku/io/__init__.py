"""File I/O for project files."""

from kaku.io.reader import list_project_files, load_project, project_from_dict
from kaku.io.writer import project_to_dict, save_project

__all__ = [
    "list_project_files",
    "load_project",
    "project_from_dict",
    "project_to_dict",
    "save_project",
]
