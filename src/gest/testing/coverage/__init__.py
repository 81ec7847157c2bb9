"""Go coverage profile parsing and directory-tree aggregation.

Usage:
    from gest.testing.coverage import read_profile, build_coverage_tree

    files = read_profile(Path("cover.out"))
    root = build_coverage_tree(files)
"""

from gest.testing.coverage.gocov import parse_profile, read_profile
from gest.testing.coverage.models import FileCoverage, TreeNode, percent
from gest.testing.coverage.tree import aggregate, build_coverage_tree, build_tree

__all__ = [
    # Models
    "FileCoverage",
    "TreeNode",
    "percent",
    # Parsing
    "parse_profile",
    "read_profile",
    # Tree
    "aggregate",
    "build_coverage_tree",
    "build_tree",
]
