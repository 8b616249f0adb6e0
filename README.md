# farsapy

Pieces for setting up smooth optimization problems: a registry of typed,
bounded options that can be changed from a text file, sparse matrices in
coordinate-list form read from text files, and a problem interface with one
ready-made test problem.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Options

`farsapy.options.Options` holds `farsapy.option.Option` entries, each looked
up by a unique name. An option has a type (`OptionType.BOOL`, `DOUBLE`,
`INTEGER` or `STRING`), a value and a description. Double and integer options
also have lower and upper bounds.

- `add_bool_option`, `add_double_option`, `add_integer_option` and
  `add_string_option` add an option. They raise `OptionError` if the name is
  already taken, if the lower bound exceeds the upper bound, or if the value
  lies outside the bounds.
- `value_as_bool`, `value_as_double`, `value_as_integer`, `value_as_string`,
  `lower_bound_as_double`, `lower_bound_as_integer`, `upper_bound_as_double`
  and `upper_bound_as_integer` read an option. They raise `OptionError` if the
  name is unknown or the option has another type.
- `modify_bool_value`, `modify_double_value`, `modify_integer_value` and
  `modify_string_value` change a value, raising `OptionError` on an unknown
  name, a wrong type or a value out of bounds.
- `modify_options_from_file(file_name="nonopt.opt")` applies lines of the
  form `name value`. A missing file changes nothing. Bool options become true
  for `true` or `1` and false otherwise; numbers are read from the start of
  the value, and integers are truncated. Unknown names, unreadable numbers and
  out-of-bounds values are logged as warnings through the `farsapy.options`
  logger and skipped.
- `format()` returns a text description of every option; `Option.format()`
  describes one.

```python
from farsapy.options import Options

options = Options()
options.add_double_option("scaling_threshold", 100.0, 0.0, float("inf"),
                          "Threshold for objective scaling.")
options.add_bool_option("verbose", False, "Print more output.")
options.modify_options_from_file("solver.opt")
print(options.value_as_double("scaling_threshold"))
```

## Sparse matrices

`farsapy.matrix.Matrix` stores `(row, column, value)` triplets.
`Matrix.from_file(file_name, sparse_format=SparseFormat.COORDINATE_LIST)`
reads a whitespace-separated file that starts with the numbers of rows,
columns and nonzeros, followed by one `row column value` triplet per nonzero,
with zero-based indices. It raises `MatrixError` if the file cannot be opened,
the header cannot be read, an index is out of range, or fewer triplets are
present than announced.

`matrix_vector_product(vector)` and `matrix_transpose_vector_product(vector)`
return the products as lists and raise `MatrixError` if the vector's length
does not match. Products are available only for
`SparseFormat.COORDINATE_LIST`; the compressed sparse row and column formats
raise `MatrixError`. `format(name)` lists the stored indices and values.

```python
from farsapy.matrix import Matrix

matrix = Matrix.from_file("features.txt")
print(matrix.number_of_rows, matrix.number_of_columns, matrix.number_of_nonzeros)
print(matrix.matrix_vector_product([1.0] * matrix.number_of_columns))
```

## Problems

`farsapy.problems.Problem` is the abstract interface for an objective over
grouped variables: `initial_point()`, `evaluate_objective(x)`,
`evaluate_gradient(x)`, `evaluate_hessian_vector_product(x, groups, v)` and
`finalize_solution(x, f, g)`. It carries `number_of_variables` and `groups`,
a list of variable-index lists.

`SimpleQuadratic(n)` is the objective f(x) = sum of (i+1) * x_i^2 for
i = 0..n-1, with every variable in its own group, starting from the point of
all ones. Its optimal value is 0 at the origin. It raises `ValueError` when a
point or vector has the wrong length.

```python
from farsapy.problems import SimpleQuadratic

problem = SimpleQuadratic(3)
x = problem.initial_point()           # [1.0, 1.0, 1.0]
print(problem.evaluate_objective(x))  # 6.0
print(problem.evaluate_gradient(x))   # [2.0, 4.0, 6.0]
```

## What this package does not do

It contains no solver: there is no iteration loop, search direction, line
search, evaluation counting or timing, and no command-line program. The
options, matrices and problems here are the inputs such a solver would use.