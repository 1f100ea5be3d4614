"""Sort the sections of an RST page alphabetically by heading."""

from __future__ import annotations

import re
from pathlib import Path

_HEADER_RE = re.compile(r"^(.+?)\n-{3,}\n", re.MULTILINE)


def sort_file(file_path) -> None:
    """Rewrite *file_path* with its dash-underlined sections in sorted order."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"{path} doesn't exist")

    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()

    matches = list(_HEADER_RE.finditer(text))
    title = text[: matches[0].start()] if matches else text

    sections: dict[str, str] = {}
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        sections[match.group(1)] = text[match.end() : end]

    parts = [title]
    for name, content in sorted(sections.items()):
        parts.append(f"{name}\n{'-' * len(name.encode('utf-8'))}\n{content}")

    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write("".join(parts))