"""
models/chef.py
--------------
Domain model for a chef account.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Chef:
    """
    Represents a single row of the `chef` table.

    Attributes:
        id: Database primary key (None for new records).
        username: Display/login name, searchable by substring.
        email: Contact address.
        password: Stored exactly as given.
        is_admin: Whether the chef has administrative rights.
    """
    username: str
    email: str
    password: str = field(repr=False)
    is_admin: bool = False
    id: Optional[int] = None

    def __str__(self) -> str:
        ident = f"#{self.id}" if self.id is not None else "#new"
        admin = " [admin]" if self.is_admin else ""
        return f"{ident} {self.username} <{self.email}>{admin}"
