# numkit

A compact toolkit of classic numerical methods plus a few textbook data
structures, in plain Python with no third-party dependencies.

## Numerical methods

- `numkit.gauss`: Gaussian elimination with partial pivoting.
  `solve(matrix, rhs)` returns a `GaussSolution` with the solution `x` and
  `error`, the largest absolute residual `|A x - b|` of the original system.
  A zero pivot raises `SingularSystemError`. `format_system` renders the
  augmented system as a text table.
- `numkit.newton`: Newton's method for nonlinear systems with a
  forward-difference Jacobian. `solve_system(residual, initial, ...)` takes a
  vector function; `solve_equations(functions, initial, ...)` takes a list of
  scalar functions. Both return a `NewtonResult` with `x`, the history as
  `NewtonStep` records (`iteration`, `delta1`, `delta2`) and `converged`.
  `jacobian`, `residual_norm`, `step_norm` and `format_steps` are available
  on their own.
- `numkit.euler`: `explicit_euler` with an adaptive step
  (`explicit_step_size`), and `implicit_euler` / `implicit_step` with step
  control by the local error (`local_error`, `choose_step`). The integrators
  return lists of `OdeRow` (`k`, `u`, `t`); `format_rows` prints them as a
  table.
- `numkit.shichman`: the variable-step second-order Shichman method,
  started by two implicit Euler steps (`shichman`), with the formula weights
  from `coefficients` (a `ShichmanCoefficients`) and the error estimate from
  `local_error`.
- `numkit.least_squares`: `fit_polynomial(xs, ys, degree)` returns a
  `PolynomialFit` with `coefficients` (lowest power first), per-point
  `residuals` and the standard error `mistake`. It needs more than
  `degree + 1` points. `power_sums` builds the normal-equation sums and
  `read_points` parses a data file.
- `numkit.simpson`: `integrate(function, start_x, finish_x, start_y,
  finish_y, eps)` integrates `function(x, y)` over a rectangle by the
  composite Simpson rule, doubling the grid (at most ten times) until two
  sums agree. It returns an `IntegrationResult` with `value`, `converged` and
  `refinements`. `simpson_sum` computes a single grid sum.

## Data structures

- `numkit.binary_tree.BinaryTree`: a binary search tree (duplicates are
  dropped) with `insert`, `extend`, in-order iteration, `delete_leaves` and
  the text renderings `format_ascending` and `format_levels`.
- `numkit.hex_number.HexNumber`: an unsigned integer of up to 64
  hexadecimal digits. It has `parse`, `str()` in upper-case hex, digit access
  by index, multiplication modulo `16**64`, equality and `decimal()`.
- `numkit.graph.Graph`: a directed graph on numbered vertices. It has
  `Graph.random(count, rng)`, `vertices`, `neighbours`, `add_vertex`,
  `delete_vertex`, `reachable`, `sources` (vertices from which every vertex is
  reachable), `drains` (vertices reachable from every vertex) and `format`.

## Library use

```python
from numkit.gauss import solve

result = solve([[8.64, 1.71, 5.42],
                [-6.39, 4.25, 1.84],
                [4.21, 7.92, -3.41]],
               [10.21, 3.41, 12.29])
print(result.x, result.error)
```

```python
from numkit.simpson import integrate

result = integrate(lambda x, y: x * x / (1 + y * y), 0, 4, 1, 2, 1e-6)
print(result.value, result.converged)
```

## Command line

The `numkit` command runs worked examples:

```
numkit gauss                 # solve a fixed 3x3 linear system
numkit newton                # solve a fixed 2x2 nonlinear system
numkit euler-explicit        # explicit Euler on a fixed ODE system
numkit euler-implicit        # implicit Euler on the same system
numkit shichman              # Shichman method on the same system
numkit least-squares         # fit a polynomial to points from a file
numkit integrate             # a fixed double integral
```

The three ODE commands print a table and also write it to `--output`
(default `Result.txt`). `least-squares` reads `--data` (default `data.txt`):
the number of points, the polynomial degree, then that many `x y` pairs,
all separated by whitespace. It writes the coefficients, one per line, to
`--output` (default `Coefficient.txt`). On a file or input error the command
prints a message and exits with status 1.

## What it does not do

The commands other than `least-squares` run fixed example problems only;
they take no matrices, equations or integrands from the user. To solve your
own problems, use the library functions.

## Running the tests

```
pip install ".[test]"
pytest
```