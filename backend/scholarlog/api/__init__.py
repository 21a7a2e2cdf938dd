"""API Layer — HTTP shell: dependencies, routes and error handlers.

Invariants:
    - Routes never contain business logic (delegate to services)
    - Outcomes are unwrapped here; errors rendered by the global handlers
"""
