"""
API layer for the detection backend.

Exposes the detection feed under /api (list, submit, dashboard summary).
"""
