"""
HTML Source Reader
------------------
Collects HTML from files and directories. Directories are walked
recursively and only files with an `.html` extension are read.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from bs4 import UnicodeDammit

HTML_EXTENSION = '.html'


def get_files(dir_path):
    """Yield every file below dir_path, recursing into subdirectories"""
    for entry in sorted(Path(dir_path).iterdir()):
        # Symlinked directories are treated as plain entries, not walked
        if entry.is_dir() and not entry.is_symlink():
            yield from get_files(entry)
        else:
            yield entry


def read_html_file(file_path):
    """Get the file content if it is an HTML file, otherwise an empty string"""
    file_path = Path(file_path)
    if file_path.suffix.lower() != HTML_EXTENSION:
        return ''

    raw = file_path.read_bytes()
    if not raw:
        return ''

    decoded = UnicodeDammit(raw, is_html=True).unicode_markup
    if decoded is None:
        print(f"WARNING: could not decode {file_path}, skipping")
        return ''
    return decoded


def path_to_html(location):
    """Get the HTML content from a single file or directory"""
    if not isinstance(location, (str, os.PathLike)):
        raise TypeError(f"Location must be string, {type(location).__name__} given")
    if not os.fspath(location):
        raise ValueError("path is required")

    path = Path(location)

    if path.is_dir():
        return ''.join(read_html_file(file_path) for file_path in get_files(path))
    if path.is_file():
        return read_html_file(path)

    print(f"WARNING: {location} does not exist, skipping")
    return ''


def paths_to_html(paths):
    """Concatenate the HTML found at one path or a sequence of paths"""
    if isinstance(paths, (str, os.PathLike)) or not isinstance(paths, Iterable):
        return path_to_html(paths)

    return ''.join(path_to_html(location) for location in paths)
