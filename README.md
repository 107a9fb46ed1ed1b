# jsonnetkit

Building blocks for a Jsonnet interpreter, written in plain Python.

## What is in the package

- **Source locations** (`jsonnetkit.location`): the `Source`, `Location` and
  `LocationRange` classes. `build_source` splits text into lines.
  `get_snippet` returns the code that a range covers. `line_beginning` and
  `line_ending` return the parts of a line before and after a range.
  `location_before`, `location_range_between` and
  `make_location_range_message` are also here.
- **Fodder** (`jsonnetkit.fodder`): the comments and whitespace that are kept
  around tokens. It has `FodderKind` and `FodderElement`, and
  `make_fodder_element` checks the constraints of each kind. The other
  functions are `fodder_append`, `fodder_concat`, `fodder_move_front`,
  `ensure_clean_newline`, `has_clean_endline`, `count_element_newlines` and
  `count_newlines`.
- **Identifiers** (`jsonnetkit.identifiers`): `IdentifierSet`, a `set` of
  names. It adds `add_identifiers` and `to_ordered_list`.
- **AST nodes** (`jsonnetkit.nodes`): dataclasses for every node kind
  (`Apply`, `Binary`, `Function`, `Local`, `Object`, `DesugaredObject` and
  the rest). The enums are `BinaryOp`, `UnaryOp`, `LiteralStringKind`,
  `ObjectFieldKind` and `ObjectFieldHide`. `binary_op_from_token` and
  `unary_op_from_token` look up an operator by the text it is written as.
- **Cloning** (`jsonnetkit.clone.clone`): makes a deep copy of an AST. The
  copy shares its `Source` objects with the original.
- **Standard-library builtins** that work on plain Python values. The
  mapping is `None` for null, `bool`, `int`/`float` for numbers, `str`,
  `list` for arrays, `dict` for objects, and any callable for functions.
  - `jsonnetkit.operators`: arithmetic, comparison and equality, bitwise
    operations on 64-bit integers, math functions (`sqrt`, `log`, `exp`,
    `mantissa`, `exponent`, and others) and `length`. `plus` on two objects
    returns a shallow merge in which the right-hand fields win.
  - `jsonnetkit.strings`: `substr`, `split_limit`, `str_replace`, `char`,
    `codepoint`, `md5`, `base64_encode`, `base64_decode`,
    `base64_decode_bytes`, `encode_utf8` and `decode_utf8`.
  - `jsonnetkit.arrays`: `join`, `reverse`, `make_array`, `flat_map`,
    `filter_array`, `make_range` and `sort_array`. `sort_array` is a stable
    sort.
  - `jsonnetkit.manifest`: `manifest_json_ex` and `to_string` render values
    as JSON with the object keys sorted. `parse_json` and `parse_yaml` read
    text into values, and every number they produce is a float.
    `object_fields` and `object_has` are also here.
  - `jsonnetkit.values`: `JsonnetError`, `type_name` and `check_number`.
    `check_number` rejects NaN and infinities.
- **Command-line helpers** (`jsonnetkit.cli_args`):
  - `simplify_args` expands `-abc` into `-a -b -c` for arguments before the
    first `--`.
  - `next_arg` and `safe_str_to_int` read option values.
  - `read_input` reads code from a string, from stdin (`-`) or from a file.
  - `write_output_file` writes to a file, or to stdout when the name is empty.

  These helpers raise `ArgumentError` when something is wrong.

If a builtin is given a value it cannot work with, it raises
`jsonnetkit.values.JsonnetError`.

## What it does not do

The package has no lexer, parser, desugarer or evaluator. It cannot run
Jsonnet programs. It has no code formatter and no linter, and it installs no
command-line programs. The AST classes and builtins are pieces for building
those tools.

## Installation

```
pip install jsonnetkit
```

## Example

```python
from jsonnetkit.manifest import manifest_json_ex
from jsonnetkit.strings import split_limit
from jsonnetkit.cli_args import simplify_args

print(manifest_json_ex({"b": [1.0, 2.0], "a": "x"}, "  "))
# {
#   "a": "x",
#   "b": [
#     1,
#     2
#   ]
# }

split_limit("a,b,c", ",", 1)      # ['a', 'b,c']
simplify_args(["-abc", "file"])   # ['-a', '-b', '-c', 'file']
```

## Running the tests

```
pip install -e ".[test]"
pytest
```