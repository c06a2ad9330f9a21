"""
API Routers Package

Router Structure:
- books.py: /api/books/* endpoints
- users.py: /api/users/* endpoints (registration, login, profile)

Each router is imported and registered in main.py.
"""

from app.routers.books import router as books_router
from app.routers.users import router as users_router

__all__ = [
    "books_router",
    "users_router",
]
