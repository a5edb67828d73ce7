#!/usr/bin/env python3
"""
Map local file paths to file URIs the Neo4j server can dereference.

The server may run in a container that sees the input directory under a
different mount point. In that case only the base file name is kept and
joined onto the mount, so file names must be unique within the input
directory.
"""

import os
from typing import Optional

from ..core.exceptions import PathError

FILE_URI_PREFIX = "file://"


def resolve_file_uri(file_path: str, container_mount: Optional[str] = None) -> str:
    """Resolve a local path to a ``file://`` URI.

    The path is never checked for existence; a missing file surfaces as a
    server-side error from the procedure that fetches it.

    Args:
        file_path: Local path to the file, relative or absolute
        container_mount: Directory under which the server sees the file, or
            None/empty to use the local absolute path

    Returns:
        URI with forward slashes, e.g. ``file:///data/a.ttl``

    Raises:
        PathError: If the absolute path cannot be computed
    """
    try:
        abs_path = os.path.abspath(os.fspath(file_path))
    except (OSError, TypeError, ValueError) as e:
        raise PathError(f"Cannot resolve absolute path for {file_path!r}: {e}") from e

    if container_mount:
        abs_path = os.path.join(container_mount, os.path.basename(abs_path))

    return FILE_URI_PREFIX + abs_path.replace("\\", "/")
