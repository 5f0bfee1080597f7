from npuzzle.engine.solver.solver import Origin, SearchNode, Solver, SolverResult

__all__ = ["Origin", "SearchNode", "Solver", "SolverResult"]
