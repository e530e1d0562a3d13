"""API Layer — FastAPI routes, dependencies, route guard and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints answer with the success/failure envelope

Design Decisions:
    - Thin routes delegate to actions (services/event_actions.py, services/auth_actions.py)
"""
