"""Filesystem traversal, text classification, and both output modes.

This package contains:
- root resolution and depth-first entry iteration
- byte-sample text/binary classification
- the streaming content emitter
- dry-run tree building and report rendering
- the ``Scanner`` that wires them to an exclusion filter
"""

from __future__ import annotations

from .classify import CLASSIFY_SAMPLE_BYTES, ContentType, content_type_of, inspect, is_text_file
from .emit import SEPARATOR, ContentEmitter
from .report import print_dry_run_results
from .scanner import Scanner, ScanMode
from .tree import FileInfo, TreeNode, build_file_tree, render_tree, sort_tree
from .walk import ScanIssue, WalkEntry, iter_entries, resolve_root

__all__ = [
    "CLASSIFY_SAMPLE_BYTES",
    "ContentType",
    "content_type_of",
    "inspect",
    "is_text_file",
    "SEPARATOR",
    "ContentEmitter",
    "print_dry_run_results",
    "Scanner",
    "ScanMode",
    "FileInfo",
    "TreeNode",
    "build_file_tree",
    "render_tree",
    "sort_tree",
    "ScanIssue",
    "WalkEntry",
    "iter_entries",
    "resolve_root",
]
