from hexaway.engine.gamesolver.deadlock import DeadlockDetector
from hexaway.engine.gamesolver.solver import Solver
from hexaway.engine.gamesolver.validator import SolutionValidator

__all__ = ["DeadlockDetector", "SolutionValidator", "Solver"]
