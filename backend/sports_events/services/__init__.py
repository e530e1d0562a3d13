"""Services Layer — authorization gate, repository, use cases, action boundary.

Invariants:
    - Every data operation runs through AuthorizationGate before the repository
    - Actions are the only entry points the API layer calls

Design Decisions:
    - One file per concern: gate, repository, use cases, actions
"""
