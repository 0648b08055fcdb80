"""Tests for dry-run tree building, ordering, and rendering."""

from __future__ import annotations

import unittest

from context_generator.exclusions import ExclusionReason
from context_generator.scanner import FileInfo, build_file_tree, render_tree


class BuildFileTreeTests(unittest.TestCase):
    def test_directories_sort_before_files_and_children_nest(self) -> None:
        files = [
            FileInfo(rel_path="a", is_dir=True),
            FileInfo(rel_path="a/c.txt", is_dir=False, is_text=True),
            FileInfo(rel_path="b.txt", is_dir=False, is_text=True),
        ]
        root = build_file_tree(sorted(files, key=lambda info: info.rel_path))

        self.assertEqual([child.name for child in root.children], ["a", "b.txt"])
        self.assertEqual([child.name for child in root.children[0].children], ["c.txt"])
        self.assertEqual(
            render_tree(root),
            [
                "  ├── a/",
                "  │   └── c.txt",
                "  └── b.txt",
            ],
        )

    def test_directory_first_even_when_file_name_sorts_earlier(self) -> None:
        files = [
            FileInfo(rel_path="a.txt", is_dir=False, is_text=True),
            FileInfo(rel_path="z", is_dir=True),
        ]
        root = build_file_tree(files)
        self.assertEqual([child.name for child in root.children], ["z", "a.txt"])

    def test_missing_parents_become_inferred_directories(self) -> None:
        root = build_file_tree([FileInfo(rel_path="x/y/z.txt", is_dir=False, is_text=True)])

        inferred = root.children[0]
        self.assertEqual(inferred.name, "x")
        self.assertTrue(inferred.is_dir)
        self.assertIsNone(inferred.file)
        self.assertEqual(
            render_tree(root),
            [
                "  └── x/",
                "      └── y/",
                "          └── z.txt",
            ],
        )

    def test_existing_nodes_are_reused_by_name(self) -> None:
        files = [
            FileInfo(rel_path="src/a.py", is_dir=False, is_text=True),
            FileInfo(rel_path="src", is_dir=True),
            FileInfo(rel_path="src/b.py", is_dir=False, is_text=True),
        ]
        root = build_file_tree(files)

        self.assertEqual(len(root.children), 1)
        src = root.children[0]
        self.assertIsNotNone(src.file)
        self.assertEqual([child.name for child in src.children], ["a.py", "b.py"])


class RenderTreeTests(unittest.TestCase):
    def test_binary_files_are_annotated_when_included(self) -> None:
        root = build_file_tree(
            [
                FileInfo(rel_path="logo.png", is_dir=False, is_text=False),
                FileInfo(rel_path="main.txt", is_dir=False, is_text=True),
            ]
        )
        self.assertEqual(
            render_tree(root),
            [
                "  ├── logo.png (binary, will be skipped)",
                "  └── main.txt",
            ],
        )

    def test_excluded_entries_show_reasons_only_when_requested(self) -> None:
        reason = ExclusionReason(pattern=".git", category="Version Control")
        root = build_file_tree(
            [
                FileInfo(rel_path=".git", is_dir=True, excluded=True, reason=reason),
                FileInfo(rel_path="debug.log", is_dir=False, excluded=True, reason=ExclusionReason("*.log", "Logs")),
            ]
        )

        self.assertEqual(
            render_tree(root, show_reasons=True),
            [
                "  ├── .git/ [Version Control: .git]",
                "  └── debug.log [Logs: *.log]",
            ],
        )
        self.assertEqual(render_tree(root), ["  ├── .git/", "  └── debug.log"])

    def test_last_sibling_prefix_uses_blank_continuation(self) -> None:
        root = build_file_tree(
            [
                FileInfo(rel_path="a", is_dir=True),
                FileInfo(rel_path="a/x", is_dir=True),
                FileInfo(rel_path="a/x/1.txt", is_dir=False, is_text=True),
                FileInfo(rel_path="a/y.txt", is_dir=False, is_text=True),
                FileInfo(rel_path="b", is_dir=True),
                FileInfo(rel_path="b/2.txt", is_dir=False, is_text=True),
            ]
        )
        self.assertEqual(
            render_tree(root),
            [
                "  ├── a/",
                "  │   ├── x/",
                "  │   │   └── 1.txt",
                "  │   └── y.txt",
                "  └── b/",
                "      └── 2.txt",
            ],
        )

    def test_empty_tree_renders_nothing(self) -> None:
        self.assertEqual(render_tree(build_file_tree([])), [])

    def test_deep_nesting_renders_without_recursion_limit(self) -> None:
        depth = 1500
        info = FileInfo(rel_path="/".join(["d"] * depth + ["f.txt"]), is_dir=False, is_text=True)

        lines = render_tree(build_file_tree([info]))

        self.assertEqual(len(lines), depth + 1)
        self.assertEqual(lines[0], "  └── d/")
        self.assertEqual(lines[-1], f"  {'    ' * depth}└── f.txt")


if __name__ == "__main__":
    unittest.main()
