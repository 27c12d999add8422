# moeassets

`moeassets` turns a directory of asset files into what a C++ program needs
to embed them as Windows `RCDATA` resources. Under the output directory it
writes a `build` folder holding:

- `resource.h` / `resource.cpp` — a small C++ runtime with a
  `moefx::resource::ResourceRegistry` that looks resources up by name, plus
  lazily loading wrappers (`LazyLoadResource`, `LazyLoadStringResource`);
- `res.h` — a generated `_regist_all_resources()` function that registers every
  asset under its path relative to the input directory (with `/` separators);
- `res/rc.rc` — a resource script with one `RCDATA` line per file, ids
  numbered from 100;
- `res/rc.o` — the compiled resource object, produced by running
  `windres res/rc.rc -O coff -o res/rc.o`.

## Installation

```
pip install .
```

`windres` (from MinGW/binutils) must be on your `PATH` for the final step.

## Usage

```
moeassets -i path/to/assets -o path/to/project
```

- `-i PATH` — the directory of assets to embed. Giving `-i` without a value
  is an error.
- `-o PATH` — the directory in which the `build` folder is created. A
  trailing `-o` with no value is ignored.

If an option appears more than once, the last one wins. Running with no
arguments at all is an error.

Any existing `build` folder under the output directory is removed first.
Files are listed recursively in name order, so ids are stable between runs.
On success the command exits with status 0. If the arguments are invalid it
prints `Invalid arguments` to standard error and exits with 1; if `windres`
fails or cannot be found it prints `Failed to compile resource file` and
exits with 1.

Add `build/resource.cpp` and `build/res/rc.o` to your C++ build, include
`build/res.h`, and call `_regist_all_resources()` once at start-up.

## Using it from Python

The pieces are also usable on their own:

```python
from moeassets.files import list_files
from moeassets.generators import build_resource_script, render_registry

script = build_resource_script(list_files("assets"), 100)
print(script.content)                      # the resource script
print(render_registry(script.file_map))    # the res.h contents
```

- `moeassets.files` — `concat_path`, `write_file`, `create_folder`,
  `clear_folder`, `exists`, and `list_files`, which returns `FileEntry`
  pairs of `(relative, path)`.
- `moeassets.generators` — `build_resource_script` (returns a
  `ResourceScript` with `content` and `file_map`), `render_registry`,
  `resource_header` and `resource_source`.
- `moeassets.runner` — `command(executable)` builds a `Command`; chain
  `add_arg(...)` calls, inspect `argv()`, and `run()` it to get the exit
  status (127 if the program is not found).
- `moeassets.args` — `parse_args(argv)` returns a `ParseResult` or raises
  `ArgumentError`.
- `moeassets.cli` — `main(argv=None)`, the command above.

## What it does not do

The package only generates sources and runs `windres`; it does not compile
or link the C++ code. The generated runtime reads resources only on
Windows builds (`_WIN32`); there is no loader for other platforms.

## Running the tests

```
pip install .[test]
pytest
```