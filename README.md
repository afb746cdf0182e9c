# turbine

Pieces of the toolchain for a small, statically typed scripting language,
written as a plain Python library with no third-party dependencies.

## What is inside

- `turbine.format_spec` – `parse_format_specifier` parses one printf-style
  specifier such as `%-8.3f` or `%,d` at the start of a string and returns a
  `FormatSpec` together with the rest of the text. Invalid flag orders,
  forbidden flag/type combinations, widths of 1024 or more and precisions of
  64 or more raise `FormatError`, which carries a `position`.
- `turbine.escseq` – `find_escape_sequence` maps the character after a
  backslash to the character it stands for, or returns `None`.
- `turbine.errors` – `ParseError` (shown as `file:line:col: error: message`)
  and `format_error_detail`, which returns the offending source line with a
  caret under the column.
- `turbine.osutil` – `get_current_directory`, `path_exists`, `path_join`
  (resolved path, or `None` if it does not exist), `dirname`, and the clocks
  `time_now`, `perf`, `elapsed` and `sleep`.
- `turbine.stackmap` – `StackMap`, `StackMapEntry` and `GlobalMap`, which
  record which of 64 slots hold references; `StackMap.find_entry` returns the
  entry at an address or the last one before it.
- `turbine.structs` – `StructTable` and `CodeStruct`, struct layouts with ids
  assigned from 0 and a value type per field.
- `turbine.intern` – `InternTable`, a string intern table with `intern`,
  `len()`, `in` and a printable `format()`.
- `turbine.syntax` – syntax-tree nodes (`Expr`, `Stmt`, `Var`), the
  `NodeKind` and `ValueKind` enums, literal constructors (`nil_literal`,
  `bool_literal`, `int_literal`, `float_literal`, `string_literal`,
  `var_expr`), `node_string`, `is_global` and `is_mutable`.
- `turbine.fold` – `unary`, `binary` and `relational` build expressions and
  fold them to literals when the operands are constant (integers wrap to 64
  bits, division truncates toward zero); `eval_int_expr` evaluates an
  integer constant expression or returns `None`.
- `turbine.filelib` – `read_text`, `write_text`, `read_lines` and
  `write_lines`, the script-level `file` functions.
- `turbine.mathlib` – the script-level `math` functions (`power`, `sqrt`,
  `floor`, `round_half_away`, trigonometric, hyperbolic and logarithmic
  functions, `isclose`) and `module_globals()` with `_PI_`, `_E_` and
  `_INF_`. Out-of-domain arguments give NaN rather than raising.
- `turbine.timelib` – `now`, `perf`, `elapsed` and `sleep`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from turbine.format_spec import parse_format_specifier

spec, rest = parse_format_specifier("%-10.3fmore")
assert spec.is_float() and spec.is_align_left()
assert spec.width == 10 and spec.precision == 3
assert rest == "more"
```

```python
from turbine.syntax import NodeKind, int_literal
from turbine.fold import binary

expr = binary(NodeKind.EXPR_ADD, int_literal(40), int_literal(2))
assert expr.kind is NodeKind.EXPR_INTLIT and expr.value == 42
assert expr.kind_orig is NodeKind.EXPR_ADD
```

```python
from turbine.intern import InternTable

table = InternTable()
a = table.intern("hello")
assert table.intern("hello") is a
assert len(table) == 1 and "hello" in table
```

## What this package does not do

It has no tokenizer, parser, bytecode generator or virtual machine, and no
command that runs scripts. It provides the pieces listed above for use by
such tools; nothing here reads or executes a script on its own.