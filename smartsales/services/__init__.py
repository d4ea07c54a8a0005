"""Services — async orchestration around the pure core rules.

Invariants:
    - Services depend on repository protocols, never on SQLAlchemy directly
    - Every service method either returns envelope data or raises a SmartSalesError
"""
