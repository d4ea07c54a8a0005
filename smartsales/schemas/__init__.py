"""Pydantic Schemas — request bodies for API endpoints.

Invariants:
    - Schemas accept loosely-typed input; domain validation happens in core rules
      so per-field and all-or-nothing semantics stay under handler control
    - Unknown keys are ignored
"""
