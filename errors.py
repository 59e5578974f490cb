"""
errors.py
---------
Exceptions raised by the service layer.
"""


class ChefBookError(Exception):
    """Base exception for chefbook errors."""


class ChefNotFoundError(ChefBookError):
    """No chef exists with the requested id."""

    def __init__(self, chef_id: int):
        self.chef_id = chef_id
        super().__init__(f"Chef #{chef_id} not found")
