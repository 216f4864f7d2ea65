from __future__ import annotations

import posixpath

DEFAULT_ROOT = "/"


def norm_sep(path: str) -> str:
    return path.replace("\\", "/")


def _normpath(path: str) -> str:
    normalized = posixpath.normpath(path)
    # POSIX keeps a leading "//" as implementation-defined; collapse it.
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def normalize_root(root: str) -> str:
    candidate = norm_sep(root)
    if not candidate.startswith("/"):
        raise ValueError(f"Tree root must be an absolute path, got {root!r}")
    return _normpath(candidate)


def resolve_path(root: str, name: str) -> str:
    """Resolve *name* against *root* without touching any storage.

    Absolute names replace the root; ``.`` and ``..`` segments are folded and
    ``..`` never climbs above ``/``.
    """
    return _normpath(posixpath.join(root, norm_sep(name)))
