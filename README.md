# scriptdoc

`scriptdoc` keeps the scripting reference of a game-server codebase in step with
its source code. It reads the GSC function and method tables from
`src/gsc/gsc.cpp`. It then works out each entry's parameters and return types
from the matching `src/gsc/gsc_<category>.cpp` file. Any function or method that
has no section yet under `docs/source/pages/scripting/` gets an editable
reStructuredText stub.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install .[test]
pytest
```

## Usage

Run the command from the root of the project that holds `src/gsc/` and `docs/`:

```
scriptdoc
```

The command parses the sources and prints how many functions and methods it
found in each category. For every entry that has no section yet, it appends a
stub to one of these files:

- `docs/source/pages/scripting/functions/<category>.rst` for functions
- `docs/source/pages/scripting/methods/<category>.rst` for methods

A page that does not exist yet is created empty first. The `functions/` and
`methods/` directories themselves must already exist.

An entry counts as documented when the page contains its script name
underlined with dashes of the same length.

### Options

| Option           | Effect                                                                                   |
|------------------|------------------------------------------------------------------------------------------|
| `--parse-only`   | Parse the sources and report counts, but generate no docs.                               |
| `--print-parsed` | Print the parsed functions and methods as JSON.                                          |
| `--fail-missing` | Stop with an error at the first entry that has no documentation, for example in CI.      |
| `--no-write`     | Print the generated stubs instead of appending them.                                     |
| `--write-sep`    | Write each page's stubs to `functions/<first heading>.temp.rst`. This takes precedence over `--no-write`. |
| `--sort`         | Sort the sections of every page in `functions/` and `methods/` alphabetically, skipping `index.rst`, then exit without parsing. |

Unknown arguments are reported on standard error and otherwise ignored.

If a file cannot be read or written, or an entry is missing under
`--fail-missing`, the command prints `Error: ...` on standard error and exits
with status 1. Otherwise it exits with status 0.

### Examples

Check that every script function is documented:

```
scriptdoc --fail-missing
```

Preview the stubs without changing any file:

```
scriptdoc --no-write
```

Put the sections of each page in alphabetical order:

```
scriptdoc --sort
```

## Library use

```python
from scriptdoc.source_parser import parse
from scriptdoc.doc_gen import generate_docs

result = parse(".")
generate_docs(result, fail_missing=False, no_write=True, write_sep=False,
              base_dir="docs/source/pages/scripting")
```

### `scriptdoc.source_parser`

- `parse(root)` returns a `ParseResult`. Its `functions` and `methods` members
  map category names to entries, and both levels are sorted by key.
- `parse_gsc_cpp(file_path)` reads the function and method tables.
- `parse_category_file(file_path)` maps each C function in a category file to a
  `ScriptFunctionDetails`.
- `extract_params(body)` and `extract_return_types(body)` read the parameters
  from a `stackGetParams` call and the return types from `Scr_Add*` calls.
  When nothing is found, each falls back to `"unknown"`.
- `ScriptFunction.to_dict()` gives the JSON form used by `--print-parsed`.

### `scriptdoc.doc_gen`

- `generate_docs(parse_result, fail_missing, no_write, write_sep, base_dir)`
  adds stubs for missing entries. With `fail_missing=True` it raises
  `MissingDocError`, which is a `FileNotFoundError`.
- `gen_template(func, is_method)` returns the stub text for one entry.
- `func_signature(name)` returns the heading that marks an entry as documented.

### `scriptdoc.doc_sort`

- `sort_file(file_path)` sorts one `.rst` page in place by its dash-underlined
  headings. Any text before the first heading stays at the top. When a heading
  appears twice, only its last section is kept.

### `scriptdoc.cli`

- `sort_docs(base_dir)` sorts every page in a docs tree, as `--sort` does.
- `main(argv)` runs the command and returns the exit status.

## Limitations

`scriptdoc` only writes and reorders `.rst` source pages. It does not build the
documentation, and the stubs it adds are placeholders that still need a real
description and example. The command always works on `src/gsc/` and
`docs/source/pages/scripting/` relative to the current directory. To use other
locations, call the library functions directly.