"""SmartSales POS API — store settings, onboarding wizard and product categories.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
