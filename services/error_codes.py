"""
Error codes for failed solver results.

Usage:
    from services import error_codes
    from services.result import Result

    if not report.valid:
        return Result.fail(", ".join(report.errors), code=error_codes.VALIDATION_ERROR)
"""

# Inputs rejected before any search ran
VALIDATION_ERROR = "validation_error"

# Unexpected failure while searching
SOLVER_ERROR = "solver_error"
