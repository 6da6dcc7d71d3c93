from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, validates the input path of the selected sub-command,
dispatches to the library operation and renders the result either as
plain text or as JSON.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional

from fileutils.core.archive import unzip, zipit
from fileutils.core.copier import copy_dir
from fileutils.core.serialization import load_json, load_yaml, save_json, save_yaml
from fileutils.core.walker import (
    build_file_info_tree,
    concatenate_all_files,
    concatenate_matching_files,
    list_files_by_suffix,
)
from fileutils.domain.errors import FileUtilsError, NotFoundError
from fileutils.domain.tree_models import tree_to_dicts
from fileutils.infra.fs import translate_os_error
from fileutils.infra.logging import LoggingConfig, configure_logging, get_logger
from fileutils.interface.cli import args as cli_args
from fileutils.utils.collections import remove_duplicates
from fileutils.utils.timestamps import get_cwd, rename_if_exists

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_NO_CWD = 4
EXIT_INTERRUPTED = 130

# Namespace attribute holding the path that must exist before dispatch
_INPUT_ATTR: Dict[str, str] = {
    "concat": "root",
    "list": "root",
    "tree": "root",
    "copy": "src",
    "zip": "src",
    "unzip": "archive",
    "convert": "src",
}

_JSON_EXTS = (".json",)
_YAML_EXTS = (".yaml", ".yml")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    input_attr = _INPUT_ATTR.get(args.command)
    if input_attr:
        input_path = getattr(args, input_attr)
        if not os.path.exists(input_path):
            msg = f"Input path does not exist: {input_path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_MISSING_INPUT

    handler = _HANDLERS[args.command]
    logger.debug(f"Dispatching '{args.command}'")
    try:
        return handler(args)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except FileUtilsError as e:
        logger.debug("Operation failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        if args.command == "cwd" and isinstance(e, NotFoundError):
            return EXIT_NO_CWD
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _cmd_concat(args: argparse.Namespace) -> int:
    if args.suffix is not None:
        data = concatenate_matching_files(args.root, args.suffix, args.follow_symlinks)
    else:
        data = concatenate_all_files(args.root, args.follow_symlinks)

    if args.output:
        try:
            with open(args.output, "wb") as f:
                f.write(data)
        except OSError as e:
            raise translate_os_error(e, args.output) from e
        _emit(args, {"output": args.output, "bytes": len(data)}, f"{len(data)} bytes written to {args.output}")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    return EXIT_OK


def _cmd_list(args: argparse.Namespace) -> int:
    files = list_files_by_suffix(args.root, args.suffix, args.strip, args.follow_symlinks)
    _emit(args, files, "\n".join(files))
    return EXIT_OK


def _cmd_tree(args: argparse.Namespace) -> int:
    nodes = build_file_info_tree(args.root, args.follow_symlinks)
    print(json.dumps(tree_to_dicts(nodes), ensure_ascii=False, indent=2))
    return EXIT_OK


def _cmd_copy(args: argparse.Namespace) -> int:
    report = copy_dir(args.src, args.dst)
    payload = asdict(report)
    payload["ok"] = report.ok

    lines = [f"Files copied: {len(report.copied)}"]
    if report.errors:
        lines.append(f"Errors: {len(report.errors)}")
        lines.extend(f"  - {err.src}: {err.error}" for err in report.errors)
    _emit(args, payload, "\n".join(lines))
    return EXIT_OK if report.ok else EXIT_FAILURE


def _cmd_zip(args: argparse.Namespace) -> int:
    target = zipit(args.src, args.target)
    _emit(args, {"archive": target}, f"Archive written: {target}")
    return EXIT_OK


def _cmd_unzip(args: argparse.Namespace) -> int:
    written = unzip(args.archive, args.target)
    _emit(args, written, f"Extracted {len(written)} files into {args.target}")
    return EXIT_OK


def _cmd_convert(args: argparse.Namespace) -> int:
    loader = _pick_codec(args.src, load_json, load_yaml)
    saver = _pick_codec(args.dst, save_json, save_yaml)
    if loader is None or saver is None:
        print("ERROR: convert supports .json, .yaml and .yml files", file=sys.stderr)
        return EXIT_FAILURE

    saver(args.dst, loader(args.src))
    _emit(args, {"src": args.src, "dst": args.dst}, f"Converted {args.src} -> {args.dst}")
    return EXIT_OK


def _cmd_dedupe(args: argparse.Namespace) -> int:
    items = remove_duplicates(args.items)
    _emit(args, items, "\n".join(items))
    return EXIT_OK


def _cmd_rename(args: argparse.Namespace) -> int:
    new_path = rename_if_exists(args.path)
    text = f"Renamed to {new_path}" if new_path else f"Nothing to rename at {args.path}"
    _emit(args, {"renamed": new_path}, text)
    return EXIT_OK


def _cmd_cwd(args: argparse.Namespace) -> int:
    cwd = get_cwd()
    _emit(args, {"cwd": cwd}, cwd)
    return EXIT_OK


_HANDLERS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "concat": _cmd_concat,
    "list": _cmd_list,
    "tree": _cmd_tree,
    "copy": _cmd_copy,
    "zip": _cmd_zip,
    "unzip": _cmd_unzip,
    "convert": _cmd_convert,
    "dedupe": _cmd_dedupe,
    "rename": _cmd_rename,
    "cwd": _cmd_cwd,
}

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _emit(args: argparse.Namespace, payload: Any, text: str) -> None:
    """Print ``payload`` as JSON when requested, ``text`` otherwise."""
    if args.json_output:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif text:
        print(text)


def _pick_codec(path: str, json_fn: Callable, yaml_fn: Callable) -> Optional[Callable]:
    ext = os.path.splitext(path)[1].lower()
    if ext in _JSON_EXTS:
        return json_fn
    if ext in _YAML_EXTS:
        return yaml_fn
    return None

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
