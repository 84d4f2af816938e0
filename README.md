# nonlocalfem

This package provides building blocks for finite element models in which the
response at a point depends on the point's neighbourhood as well as on the
point itself. An influence function describes that neighbourhood. The package
contains symbolic shape functions, reference elements with quadrature tables,
per-mesh geometry and neighbour search, 1D boundary condition handling,
1D influence functions, and VTK output for 2D fields.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

The package has no runtime dependencies.

## Modules

### `nonlocalfem.symbolic`

This module provides expression trees for shape functions.

- **Building expressions.** Use `Variable(index)`, `Constant(value)` and
  `IntegralConstant(n)` together with `+`, `-`, `*`, `/` and unary `-`. Plain
  numbers are wrapped as `Constant`.
- **Evaluating.** Call an expression to evaluate it. The arguments can be given
  separately, as in `e(x, y)`, or as one sequence, as in `e((x, y))`. When both
  operands of `/` are integers, the result is truncated toward zero.
- **Differentiating.** `e.derivative(variable)` returns the exact derivative.
  The variable can be a `Variable` or an integer index.
- **Simplifying.** `simplify(e)` folds constant parts. It also removes
  additions of 0, multiplications by 0 and 1, divisions by 1, and double
  negations. If `simplify` meets a division by a literal zero, it raises
  `ZeroDivisionError`.

### `nonlocalfem.constants`

This module defines the following enums:

- `Axis`
- `BoundaryCondition`
- `Material`
- `Theory`
- `ThermalBoundaryCondition`
- `MechanicalBoundaryCondition`

It also defines `MAX_NONLOCAL_WEIGHT` (0.999), `neumann_max_boundary_error()`
and `alpha_threshold()`. The last two return 1e-10, or 1e-5 when they are
called with `single_precision=True`.

### `nonlocalfem.sparse_utils`

- `to_general_condition` and `to_general_conditions` map a thermal or
  mechanical condition onto its `BoundaryCondition` kind.
- `prepare_memory(row_counts, cols)` builds a `CsrStorage` (indptr, indices,
  values). Every index is set to the last column and every value to zero.
- `sort_indices(indptr, indices)` sorts the column indices within each row.

### `nonlocalfem.boundary_1d`

- `StationaryBoundary1D` and `NonstationaryBoundary1D` are boundary conditions
  for the ends of a segment.
- `boundary_type` returns the kinds of the conditions.
- `to_stationary` and `to_stationary_pair` freeze time-dependent conditions at
  a given time.
- `boundary_condition_first_kind_1d` and `boundary_condition_second_kind_1d`
  return a right-hand side with prescribed values or fluxes applied.

### `nonlocalfem.influence_1d`

This module provides three normalised influence functions:

- `Constant1D(r)`
- `Polynomial1D(r, p, q)`, whose value is `norm * (1 - (h/r)**p)**q`
- `NormalDistribution1D(r)`

Each one has `radius` (which can be set) and `norm` properties. Call one as
`f(x, y)` to evaluate it.

### `nonlocalfem.heat_1d`

- `EquationParameters1D` holds the problem parameters: conductivity, heat
  capacity, density, the solution integral for Neumann problems, and the heat
  transfer coefficients.
- `convection_condition_matrix_part_1d` updates a list-of-rows matrix in place.
- `convection_condition_right_part_1d` returns the right-hand side with the
  convection terms added.
- `is_neumann_problem`, `is_robin_problem` and `is_solvable_robin_problem` are
  the solvability checks.
- `check_solvability` raises `ValueError` for an unsolvable Neumann or Robin
  problem. Otherwise it returns whether the problem is a Neumann problem.

### `nonlocalfem.elements`

- `Element2D` is a reference element built from three things:
  - its nodes
  - its basis functions
  - a boundary function for each `Side2D`

  The basis functions can be symbolic expressions. In that case their
  derivatives are found automatically.
- `Element2DIntegrate` adds tables of weights and of basis values and
  derivatives at the quadrature nodes. These come from one or two 1D
  quadratures. A quadrature is any object with `nodes_count()`, `node(i)`,
  `weight(i)` and `boundary(Side1D)`.
- `nearest_qnode(i)` gives the quadrature node closest to element node `i`.

### `nonlocalfem.mesh_geometry`

These functions compute the following from a mesh:

- node-to-element maps and local numbering
- quadrature shifts
- quadrature coordinates and Jacobi matrices, both inside the domain and on
  boundary groups
- global basis derivatives
- element areas
- element centres

`jacobian` returns the length of a 2-entry tangent or `|det|` of a 4-entry
matrix.

### `nonlocalfem.mesh_proxy`

`MeshProxy(mesh)` caches all of the geometry above. Its accessors are:

- `quad_coords`
- `jacobi_matrices`
- `dndx`
- `quad_coords_bound`
- `jacobi_matrices_bound`
- `element_area`
- `nodes_elements_map`
- `global_to_local_numbering`

`find_neighbours(r, balancing, is_triangle)` records, for each element, the
elements whose centres lie closer than `r`.

### `nonlocalfem.solution_2d`

`Solution2D` is the base for a field on a 2D mesh. It holds a local weight and
an influence function.

- `calc_nonlocal(callback)` calls `callback(element, node)` once for each
  distinct neighbour element of every node.
- `save_scalars`, `save_vectors` and `save_as_vtk` write legacy VTK point data.
  `save_as_vtk` accepts a stream or a file path.

## The mesh object you supply

The package does not read meshes. `MeshProxy` and the functions in
`mesh_geometry` need an object that has the following methods:

- `nodes_count()`
- `elements_count()`
- `element_2d(e)`
- `node_number(e, i)`
- `node(n)`
- `boundary_names()`
- `boundary_elements_count(bound)`
- `element_1d(bound, e)`
- `boundary_node_number(bound, e, i)`

The elements returned must have `nodes_count()`, `qnodes_count()`, `weight(q)`,
`qN`, `qNxi`, and `N`. 2D elements must also have `qNeta`.
`Element2DIntegrate` provides all of these. `Solution2D.save_as_vtk` also calls
the mesh's own `save_as_vtk(stream)`.

## Example

```python
from nonlocalfem.symbolic import Variable, simplify

xi, eta = Variable(0), Variable(1)
shape = 0.25 * (1 - xi) * (1 - eta)

print(shape(0.0, 0.0))                        # 0.25
print(simplify(shape.derivative(xi))(0, 0))   # -0.25
```

```python
from nonlocalfem.influence_1d import Polynomial1D

bell = Polynomial1D(0.1, 2, 1)
print(bell(0.5, 0.52))
```

## What the package does not do

- It has no mesh file reader. It does not assemble or solve stiffness,
  conductivity or capacity matrices. It has no complete 1D or 2D heat or
  elasticity solver. The pieces here are inputs to such solvers.
- It provides no command-line programs.
- `MeshProxy` works with a single worker, which owns every node. The
  `balancing` argument of `find_neighbours` therefore has no effect.

## Running the tests

```
pytest
```