"""In-memory filesystem.

This package provides an ephemeral, hierarchical namespace of directories and
files held entirely in memory, for hosts that need a throwaway filesystem-like
structure without touching persistent storage.
"""

from importlib.metadata import PackageNotFoundError, version

from imfs.imfs import Imfs

# Expose the version for programmatic use
try:
    __version__ = version("imfs")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["Imfs", "__version__"]
