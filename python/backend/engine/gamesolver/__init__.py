from backend.engine.gamesolver.solver import Configuration, Solver

__all__ = ["Configuration", "Solver"]
