"""Add stub documentation for script functions and methods missing from the RST pages."""

from __future__ import annotations

from pathlib import Path

from .colors import B_CYAN, B_GREEN, B_PURPLE, BHI_WHITE, CLEAR_COLOR
from .source_parser import ParseResult, ScriptFunction

DEFAULT_DOCS_DIR = Path("docs/source/pages/scripting")

_SKIP_NO_WRITE = (
    f"{BHI_WHITE}Skipping writing to docs since {B_PURPLE}--no-write "
    f"{BHI_WHITE}was given.{CLEAR_COLOR}"
)
_WRITING_SEP = (
    f"{BHI_WHITE}Writing to a separate temp file since {B_PURPLE}--write-sep "
    f"{BHI_WHITE}argument was given.{CLEAR_COLOR}"
)


class MissingDocError(FileNotFoundError):
    """Raised when a function has no documentation and missing docs are fatal."""


def func_signature(name: str) -> str:
    """Return the RST heading for *name*: the name underlined with dashes."""
    return f"{name}\n{'-' * len(name.encode('utf-8'))}"


def gen_template(func: ScriptFunction, is_method: bool) -> str:
    """Build a stub RST section documenting *func*."""
    kind = "method" if is_method else "function"
    called_on = "<some object> " if is_method else ""

    lines = [
        "",
        func_signature(func.script_name),
        "",
        ".. csv-table:: **Arguments**",
        '    :header: "Argument", "Type", "Description"',
        "    :align: left",
        "",
    ]
    params = func.params or []
    lines.extend(
        f'    "{p.param_name}", "{p.param_type}", "description"' for p in params
    )
    lines.append("")
    if is_method:
        lines.append("| **Called on** ``<some object>``")
    lines.extend(f"| **Returns** ``{r}``" for r in func.returns)
    lines.append("")
    lines.append(
        f"this is the Description of the {kind}. Explain the usage in detail here"
    )
    args = ", ".join(p.param_name for p in params)
    lines.extend(
        [
            "",
            "**Example**",
            "",
            ".. code-block:: cpp",
            "    ",
            "    // stub example for dev.",
            "    // dev. should remove this comment after he is done changing it",
            f"    {called_on}{func.script_name}({args});",
            "",
            "",
        ]
    )
    return "\n".join(lines)


def _append(path: Path, data: str) -> None:
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(f"\n{data}\n")


def generate_docs(
    parse_result: ParseResult,
    fail_missing=False,
    no_write=False,
    write_sep=False,
    base_dir=DEFAULT_DOCS_DIR,
) -> None:
    """Append stubs for every undocumented function and method under *base_dir*."""
    base = Path(base_dir)
    base.mkdir(parents=True, exist_ok=True)

    sections = (
        ("functions", parse_result.functions, False),
        ("methods", parse_result.methods, True),
    )
    for subdir, groups, is_method in sections:
        for category, entries in groups.items():
            file_path = base / subdir / f"{category}.rst"
            if not file_path.exists():
                file_path.write_text("", encoding="utf-8")
            content = file_path.read_text(encoding="utf-8")

            template = ""
            for func in entries.values():
                if func_signature(func.script_name) in content:
                    continue
                if fail_missing:
                    raise MissingDocError(
                        f"No documentation found for {func.script_name} in {category}.rst"
                    )
                print(
                    f"Missing doc for {B_GREEN}{func.script_name}{CLEAR_COLOR} "
                    f"in {B_CYAN}{category}.rst{CLEAR_COLOR}"
                )
                print("Adding stub, please edit before commiting.\n")
                template += gen_template(func, is_method)

            if not template:
                continue
            if write_sep:
                print(_WRITING_SEP)
                name = template.lstrip().splitlines()[0]
                temp_path = base / "functions" / f"{name}.temp.rst"
                with open(temp_path, "w", encoding="utf-8", newline="") as handle:
                    handle.write(template)
            elif no_write:
                print(_SKIP_NO_WRITE)
                print(template)
            else:
                _append(file_path, template)