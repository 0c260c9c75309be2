# mjrs-utils

A small command-line tool that reads MuJoCo C headers and prints
wrapper code for a set of safe bindings to standard output. It helps
you keep those bindings up to date with new MuJoCo releases.

## Installation

```
pip install .
```

## Commands

All output goes to standard output, so redirect it wherever you need it.
`mjrs-utils --version` prints the version.

### Views over model and data arrays

```
mjrs-utils create-views path/to/indexer_xmacro.h
```

Reads the X-macro header. For each `#define MJ<CLASS>_<ITEM>` block it
prints a `class: item` heading, with the class in lower case. After the
heading it prints one `let` line for each `X(...)` entry that has five
fields. An entry whose last field is not `1` becomes `(id * dim, dim)`.
An entry whose last field is `1` becomes a `mj_view_indices!` call
that uses the entry's size field.

### Wrappers for functions without pointers

```
mjrs-utils create-fixed-array-function-wrappers path/to/mujoco.h
```

Finds each commented `MJAPI` declaration in `mujoco.h` and prints a
wrapper function for it. It skips a declaration if its return type or
any of its parameters contains a pointer, or if any parameter lacks a
type or a name (for example `void`). Fixed-size array parameters become
array references: `const` arrays become `&[T; N]` and are passed as
`.as_ptr()`, and other arrays become `&mut [T; N]` and are passed as
`.as_mut_ptr()`. Names are converted to snake_case. Types that start
with `mj` are converted to PascalCase. Other types are written as
`std::ffi::c_<type>`. The `//` comment above each declaration becomes
a `///` doc comment, with its square brackets escaped.

### Methods for a struct

```
mjrs-utils create-model-methods path/to/mujoco.h mjModel mjvScene mjrContext
```

Prints a method wrapper for each commented `MJAPI` declaration whose
parameter list mentions the given struct name (here `mjModel`). A
`const` parameter of that type becomes `&self`, passed as
`self.ffi()`. Any other parameter of that type becomes `&mut self`,
passed as `self.ffi_mut()`. Other pointer parameters become `&T` or
`&mut T`. The `mj_`, `mjv_`, `mjr_`, `mjd_` and `mju_` prefixes are
removed from the method names.

Any names after the struct name form a blacklist. The tool skips every
function whose parameter list contains one of them. It also skips
functions that take `void` arrays.

## Using it from Python

Each generator has a function that takes header text and yields the
generated chunks, so you can use it without going through files:

```python
from mjrs_utils.fixed_arr_fn import iter_fixed_array_fn_wrappers
from mjrs_utils.model_fn import iter_mj_self_methods, process_arguments
from mjrs_utils.views import iter_view_lines

with open("mujoco.h") as fh:
    header = fh.read()

for method in iter_mj_self_methods(header, "mjData", ["mjvScene"]):
    print(method)
```

`process_arguments(param_string, self_name, blacklist)` returns a pair:
the method's parameters and its call arguments. It returns `None` if
the function is to be skipped.

The file-based functions `create_views`, `create_fixed_array_fn_wrappers`
and `create_mj_self_methods` read a path and print the results.
`mjrs_utils.cli.main(argv=None)` runs the command line.

`mjrs_utils.casing` has the helpers for name conversion and doc
comments: `to_snake_case`, `to_pascal_case`, `escape_doc_comment`,
`rust_type` and `return_annotation`.

## What it does not do

The tool only prints code. It does not write or update files in a
bindings tree, and it does not check that the generated code compiles.
It matches declarations with regular expressions rather than a C
parser, so it can miss declarations laid out in unusual ways.

## Running the tests

```
pip install ".[test]"
pytest
```