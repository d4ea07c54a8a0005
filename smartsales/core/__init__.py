"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Repository contracts live in repository_protocols.py; implementations live in infrastructure/
"""
