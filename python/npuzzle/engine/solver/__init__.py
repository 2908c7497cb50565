from npuzzle.engine.solver.solver import Solver, SolverStatus

__all__ = ["Solver", "SolverStatus"]
