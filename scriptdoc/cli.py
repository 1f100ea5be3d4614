"""Command-line entry point for the script documentation tool."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from .colors import B_CYAN, B_GREEN, B_PURPLE, BHI_WHITE, CLEAR_COLOR
from .doc_gen import DEFAULT_DOCS_DIR, generate_docs
from .doc_sort import sort_file
from .source_parser import parse

_FLAGS = (
    "--parse-only",
    "--print-parsed",
    "--fail-missing",
    "--no-write",
    "--write-sep",
    "--sort",
)


def sort_docs(base_dir=DEFAULT_DOCS_DIR) -> None:
    """Sort every page in the functions and methods directories except index.rst."""
    base = Path(base_dir)
    for directory in (base / "functions", base / "methods"):
        for entry in sorted(directory.iterdir()):
            if entry.name == "index.rst":
                print("Skipping index.rst")
                continue
            print(f"{BHI_WHITE}Sorting {B_CYAN}{entry.name}{CLEAR_COLOR}")
            sort_file(entry)
    print()


def _to_json(groups) -> str:
    data = {
        category: {key: func.to_dict() for key, func in entries.items()}
        for category, entries in groups.items()
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def main(argv=None) -> int:
    """Run the tool; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(f"{B_GREEN}Free Palestine{CLEAR_COLOR} 🍉️ 🇵🇸️ \n\n")

    flags = set()
    for arg in args:
        if arg in _FLAGS:
            flags.add(arg)
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)

    try:
        if "--sort" in flags:
            sort_docs()
            return 0

        data = parse()

        if "--print-parsed" in flags:
            print(f"Functions: \n{_to_json(data.functions)}")
            print(f"Methods: \n{_to_json(data.methods)}")
            print()

        if "--parse-only" in flags:
            print(
                f"{BHI_WHITE}Skipping doc generation since {B_PURPLE}--parse-only "
                f"{BHI_WHITE}argument was given.{CLEAR_COLOR}"
            )
        else:
            generate_docs(
                data,
                fail_missing="--fail-missing" in flags,
                no_write="--no-write" in flags,
                write_sep="--write-sep" in flags,
            )
    except (OSError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())