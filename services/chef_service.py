"""
services/chef_service.py
------------------------
Business logic for chef accounts: input validation, not-found handling
and text formatting for the command line.
"""

from typing import Optional

from errors import ChefNotFoundError
from models.chef import Chef
from repositories.chef_repo import ChefRepository
from utils.logger import get_logger
from utils.pagination import Page, PageOptions

logger = get_logger(__name__)


class ChefService:
    """Orchestrates chef registration, lookup and maintenance."""

    def __init__(self, repo: ChefRepository):
        self.repo = repo

    def register(self, username: str, email: str, password: str, is_admin: bool = False) -> Chef:
        """
        Validate and persist a new chef.

        Raises:
            ValueError: On an empty username/password or a malformed email.
        """
        username = username.strip()
        email = email.strip()
        if not username:
            raise ValueError("Username cannot be empty")
        if not password:
            raise ValueError("Password cannot be empty")
        if "@" not in email:
            raise ValueError(f"Invalid email address: {email!r}")

        chef = Chef(username=username, email=email, password=password, is_admin=is_admin)
        self.repo.create(chef)
        return chef

    def find(self, chef_id: int) -> Chef:
        chef = self.repo.get_by_id(chef_id)
        if chef is None:
            raise ChefNotFoundError(chef_id)
        return chef

    def rename(self, chef_id: int, username: str) -> Chef:
        username = username.strip()
        if not username:
            raise ValueError("Username cannot be empty")
        chef = self.find(chef_id)
        chef.username = username
        self._save(chef)
        return chef

    def set_admin(self, chef_id: int, is_admin: bool) -> Chef:
        chef = self.find(chef_id)
        if chef.is_admin != is_admin:
            chef.is_admin = is_admin
            self._save(chef)
        return chef

    def remove(self, chef_id: int) -> Chef:
        chef = self.find(chef_id)
        if not self.repo.delete(chef):
            # Deleted by someone else between the read and the delete.
            logger.warning(f"Chef #{chef_id} vanished before it could be deleted")
            raise ChefNotFoundError(chef_id)
        return chef

    def list_page(self, options: PageOptions, term: Optional[str] = None) -> Page[Chef]:
        """One page of all chefs, or of those matching `term` when given."""
        if term is None:
            return self.repo.get_all_paged(options)
        return self.repo.search_paged(term, options)

    @staticmethod
    def format_page(page: Page[Chef]) -> str:
        """Render a page as lines of text with a navigation footer."""
        if not page.items:
            return f"No chefs found (page {page.page_number} of {page.total_pages})."
        lines = [str(chef) for chef in page.items]
        lines.append(
            f"-- page {page.page_number}/{page.total_pages}, "
            f"{page.total_elements} chef(s) total"
        )
        return "\n".join(lines)

    def _save(self, chef: Chef) -> None:
        if not self.repo.update(chef):
            logger.warning(f"Chef #{chef.id} vanished before it could be updated")
            raise ChefNotFoundError(chef.id)
