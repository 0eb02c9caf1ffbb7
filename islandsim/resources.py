"""Locating the asset directory and making it the working directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def _application_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def search_and_set_resource_dir(
    folder_name: str, app_dir: str | os.PathLike[str] | None = None
) -> Path | None:
    """Find folder_name and chdir into it.

    Looks in the working directory, then the application directory and up to
    three levels above it. Returns the directory chosen, or None when nothing
    was found and the working directory is unchanged.
    """
    if Path(folder_name).is_dir():
        target = Path.cwd() / folder_name
        os.chdir(target)
        return target

    base = Path(app_dir) if app_dir is not None else _application_dir()
    for levels in range(4):
        candidate = base.joinpath(*([".."] * levels), folder_name)
        if candidate.is_dir():
            os.chdir(candidate)
            return candidate
    return None