"""Extract script functions and methods from the engine's GSC sources."""

from __future__ import annotations

import re
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .colors import B_CYAN, B_YELLOW, BHI_WHITE, CLEAR_COLOR

_U16_MAX = 0xFFFF

_TABLE_LINE_RE = re.compile(r'\{\s*"([^"]+)"\s*,\s*(\w+)\s*,\s*\d+\s*\},')
_FUNC_SIGNATURE_RE = re.compile(
    r"void\s+(\w+)\s*\([^)]*\)\s*(?://[^\n]*)?\s*\{", re.MULTILINE
)
_PARAMS_RE = re.compile(r'\s*stackGetParams\(\s*"([^"]+)"\s*,([^)]+)\)')
_SCR_ADD_RE = re.compile(r"Scr_Add(\w+)\s*\(")

_PARAM_TYPES = {
    "i": "int",
    "v": "vector",
    "f": "float",
    "s": "string",
    "c": "const string",
    "l": "localized string",
}

_SCR_ADD_TYPES = {
    "Scr_AddBool": "bool",
    "Scr_AddInt": "int",
    "Scr_AddFloat": "float",
    "Scr_AddString": "string",
    "Scr_AddArray": "array",
    "Scr_AddVector": "vector",
    "Scr_AddObject": "object",
}


@dataclass
class ScriptParameter:
    """A single parameter of a script function."""

    param_type: str
    param_name: str


@dataclass
class ScriptFunction:
    """A script-callable function or method."""

    name: str
    script_name: str
    params: list[ScriptParameter] | None = None
    returns: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-friendly form (the internal name is omitted)."""
        return {
            "scriptName": self.script_name,
            "params": None
            if self.params is None
            else [
                {"param_type": p.param_type, "param_name": p.param_name}
                for p in self.params
            ],
            "returns": list(self.returns),
        }


@dataclass
class ScriptFunctionDetails:
    """Parameters and return types found in a function body."""

    params: list[ScriptParameter]
    returns: list[str]


@dataclass
class ParseResult:
    """Functions and methods grouped by category, both sorted by key."""

    functions: dict[str, dict[str, ScriptFunction]]
    methods: dict[str, dict[str, ScriptFunction]]


def _terminal_cols() -> int:
    return shutil.get_terminal_size().columns


def _blank_line() -> str:
    """Return a carriage return followed by a terminal-wide run of spaces."""
    return "\r" + " " * _terminal_cols()


def _sorted_nested(
    groups: dict[str, dict[str, ScriptFunction]],
) -> dict[str, dict[str, ScriptFunction]]:
    return {cat: dict(sorted(entries.items())) for cat, entries in sorted(groups.items())}


def _combine(
    root: Path, table: dict[str, list[ScriptFunction]], key_by_script_name: bool
) -> dict[str, dict[str, ScriptFunction]]:
    combined: dict[str, dict[str, ScriptFunction]] = {}
    for category, entries in table.items():
        details = parse_category_file(root / "src" / "gsc" / f"gsc_{category}.cpp")
        for entry in entries:
            found = details.get(entry.name)
            if found is None:
                continue
            key = entry.script_name if key_by_script_name else entry.name
            combined.setdefault(category, {})[key] = ScriptFunction(
                name=entry.name,
                script_name=entry.script_name,
                params=list(found.params),
                returns=list(found.returns),
            )
    return _sorted_nested(combined)


def _report(groups: dict[str, dict[str, ScriptFunction]], kind: str) -> int:
    total = 0
    for category, entries in groups.items():
        print(
            f"{B_YELLOW}{len(entries)}{CLEAR_COLOR} {kind} in "
            f"{B_CYAN}gsc_{category}.cpp{CLEAR_COLOR}"
        )
        total += len(entries)
        if total > _U16_MAX:
            raise OverflowError("too many functions to fit in u16")
    return total


def parse(root=".") -> ParseResult:
    """Parse gsc.cpp and the per-category files under *root*."""
    root = Path(root)
    print(f"{BHI_WHITE}Reading {B_CYAN}gsc.cpp{CLEAR_COLOR}")
    script_functions, script_methods = parse_gsc_cpp(root / "src" / "gsc" / "gsc.cpp")

    print(f"{BHI_WHITE}Parsing Script Functions{CLEAR_COLOR}")
    functions = _combine(root, script_functions, key_by_script_name=False)
    sys.stdout.write(_blank_line())
    total = _report(functions, "functions")
    print(f"Total {B_YELLOW}{total}{CLEAR_COLOR} script functions")

    print(f"\n{BHI_WHITE}Parsing Script Methods{CLEAR_COLOR}")
    methods = _combine(root, script_methods, key_by_script_name=True)
    sys.stdout.write(_blank_line())
    total = _report(methods, "methods")
    print(f"Total {B_YELLOW}{total}{CLEAR_COLOR} script methods\n")

    return ParseResult(functions=functions, methods=methods)


def parse_gsc_cpp(
    file_path,
) -> tuple[dict[str, list[ScriptFunction]], dict[str, list[ScriptFunction]]]:
    """Read the function and method tables, grouped by category."""
    code = Path(file_path).read_text(encoding="utf-8")
    tables: dict[str, dict[str, list[ScriptFunction]]] = {"functions": {}, "methods": {}}
    current: str | None = None

    for line in code.splitlines():
        sline = line.strip()
        if sline.startswith("//"):
            continue
        if "scriptFunctions[]" in sline:
            current = "functions"
            continue
        if "scriptMethods[]" in sline:
            current = "methods"
            continue
        if current is None or "test" in sline:
            continue
        match = _TABLE_LINE_RE.search(sline)
        if not match:
            continue
        script_name, func_name = match.group(1), match.group(2)
        parts = func_name.split("_")
        if len(parts) >= 2 and parts[0] == "gsc":
            tables[current].setdefault(parts[1], []).append(
                ScriptFunction(name=func_name, script_name=script_name)
            )

    return tables["functions"], tables["methods"]


def _function_body(code: str, start: int) -> str:
    depth = 1
    end = start
    while end < len(code) and depth > 0:
        char = code[end]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        end += 1
    body = code[start:end]
    return body[:-1] if body else body


def _show_progress(function_name: str) -> None:
    padding = max(0, _terminal_cols() - len(function_name) - 3 - 1)
    sys.stdout.write(f"\r{function_name}..." + " " * padding)
    sys.stdout.flush()


def parse_category_file(file_path) -> dict[str, ScriptFunctionDetails]:
    """Map each C function in a category file to its parameters and returns."""
    code = Path(file_path).read_text(encoding="utf-8")
    details: dict[str, ScriptFunctionDetails] = {}
    for match in _FUNC_SIGNATURE_RE.finditer(code):
        function_name = match.group(1)
        _show_progress(function_name)
        body = _function_body(code, match.end())
        details[function_name] = ScriptFunctionDetails(
            params=extract_params(body),
            returns=extract_return_types(body),
        )
    return details


def extract_params(body: str) -> list[ScriptParameter]:
    """Read parameter types and names from a stackGetParams call."""
    match = _PARAMS_RE.search(body)
    if match is None:
        return [ScriptParameter("unknown", "unknown")]
    types = [_PARAM_TYPES.get(c, "unknown") for c in match.group(1)]
    names = [name.strip().lstrip("&") for name in match.group(2).split(",")]
    return [ScriptParameter(t, n) for t, n in zip(types, names)]


def extract_return_types(body: str) -> list[str]:
    """Collect the distinct types pushed with Scr_Add* calls."""
    found: dict[str, None] = {}
    for match in _SCR_ADD_RE.finditer(body):
        mapped = map_scr_add_to_type(f"Scr_Add{match.group(1)}")
        if mapped is not None:
            found[mapped] = None
    return list(found) if found else ["unknown"]


def map_scr_add_to_type(func_name: str) -> str | None:
    """Return the script type for a Scr_Add* function, or None."""
    return _SCR_ADD_TYPES.get(func_name)