from .forge import resolve_forge, select_forge_version
from .neoforge import resolve_neoforge, select_neoforge_version

__all__ = [
    "resolve_forge",
    "select_forge_version",
    "resolve_neoforge",
    "select_neoforge_version",
]
