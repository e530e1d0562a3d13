"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row is owned by exactly one user (user_id)
"""

from sports_events.models.event import Event  # noqa: F401
