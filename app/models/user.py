"""User record"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A persisted user.

    ``id`` stays ``None`` until the storage assigns one on insert. Table
    layout and constraints are declared separately in ``app.db.models.user``.
    """
    firstname: str
    lastname: str
    id: Optional[int] = None
