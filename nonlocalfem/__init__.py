"""Building blocks for local and nonlocal finite element models: symbolic shape functions, elements, mesh geometry, 1D boundary conditions, influence functions and VTK output."""

__version__ = "0.1.0"

__all__ = [
    "boundary_1d",
    "constants",
    "elements",
    "heat_1d",
    "influence_1d",
    "mesh_geometry",
    "mesh_proxy",
    "solution_2d",
    "sparse_utils",
    "symbolic",
]