"""Infrastructure Layer — database engine, password hashing and logging setup.

Invariants:
    - Infrastructure never holds request state
    - Blocking work (bcrypt) is moved off the event loop here, not in callers
"""
