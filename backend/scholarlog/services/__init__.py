"""Services Layer — credential store, authenticator and the generic resource engine.

Invariants:
    - Services return Outcome values for client-facing failures
    - Every service receives the DatabaseSessionManager through its constructor
"""
