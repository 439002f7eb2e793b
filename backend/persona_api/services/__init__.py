"""Services Layer - business delegates between routes and persistence.

Invariants:
    - Services depend on repository Protocols, not on SQLAlchemy
"""
