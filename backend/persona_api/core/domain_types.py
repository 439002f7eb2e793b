"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PersonaId wraps the store-assigned integer key; never a sentinel value
    - Integer fields fit the store's 32-bit INTEGER column (INT32_MIN..INT32_MAX)
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonaId = NewType("PersonaId", int)


# ─── Value Bounds ────────────────────────────────────────────────

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
