"""Label-based path filter evaluation.

This package decides, for each node a graph walk visits, whether the node belongs
in the results and whether the walk should keep expanding past it, based on the
node's labels and a filter specification such as ``"-Secret|>Person|/Company"``.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("labelpath")
except PackageNotFoundError:
    __version__ = "unknown"
