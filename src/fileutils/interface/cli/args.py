from __future__ import annotations

"""
CLI Argument Definition.

Declares the sub-commands of the fileutils tool. Each sub-parser stores
its handler name in ``command`` so the application controller can route
the parsed namespace.
"""

import argparse

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fileutils CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fileutils",
        description="Filesystem traversal, archive and copy utilities.",
    )

    # --- Global flags ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )
    p.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories (cycles are skipped).",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Tree walking ---
    concat = sub.add_parser("concat", help="Concatenate the bytes of files under a directory.")
    concat.add_argument("root")
    concat.add_argument("--suffix", default=None, help="Only files whose name ends with this text.")
    concat.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout.")

    lst = sub.add_parser("list", help="List files with a given extension.")
    lst.add_argument("root")
    lst.add_argument("suffix", help="Extension including the dot, e.g. .html")
    lst.add_argument("--strip", action="store_true", help="Remove the extension text from each name.")

    tree = sub.add_parser("tree", help="Print the directory tree as JSON.")
    tree.add_argument("root")

    # --- Copy and archives ---
    copy = sub.add_parser("copy", help="Copy a file or directory tree.")
    copy.add_argument("src")
    copy.add_argument("dst")

    zp = sub.add_parser("zip", help="Pack a file or directory into a ZIP archive.")
    zp.add_argument("src")
    zp.add_argument("target")

    uz = sub.add_parser("unzip", help="Extract a ZIP archive.")
    uz.add_argument("archive")
    uz.add_argument("target")

    # --- Structured data and leaf helpers ---
    conv = sub.add_parser("convert", help="Convert between JSON and YAML by file extension.")
    conv.add_argument("src")
    conv.add_argument("dst")

    dd = sub.add_parser("dedupe", help="Print the arguments with duplicates removed.")
    dd.add_argument("items", nargs="*")

    rn = sub.add_parser("rename", help="Move a path aside to <path>-Pre-<timestamp>.")
    rn.add_argument("path")

    sub.add_parser("cwd", help="Print the current working directory.")

    return p
