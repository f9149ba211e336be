"""
Application services layer.

Services orchestrate solver operations and report outcomes as Results.
"""

from services.interfaces import ISquadSolverService
from services.result import Result
from services.squad_solver_service import SquadSolverService, result_to_response

__all__ = [
    "ISquadSolverService",
    "Result",
    "SquadSolverService",
    "result_to_response",
]
