"""Service layer — ServiceResult-returning operations over the domain.

INVARIANT: Services never raise for bad input; they return
``ServiceResult(ok=False, ...)`` instead.
"""
