"""Service layer: runs pattern scenarios and wraps their outcomes.

INVARIANT: All service-layer methods return ServiceResult.
"""
