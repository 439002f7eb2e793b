"""Infrastructure Layer - database access, persistence gateway and logging.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All SQLAlchemy failures surface as DatabaseError
"""
