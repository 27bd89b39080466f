"""Service layer — host operations over the domain value types.

Every public service method returns a ServiceResult.
"""
