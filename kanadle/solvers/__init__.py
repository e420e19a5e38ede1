from .base import Solver, available_solvers, create_solver, solver
from .random_consistent import RandomConsistentSolver
from .positional_freq import PositionalFreqSolver

__all__ = ["Solver", "available_solvers", "create_solver", "solver",
           "RandomConsistentSolver", "PositionalFreqSolver"]
