"""API route handlers."""

from .search import router as search_router
from .residences import router as residences_router
from .contact import router as contact_router
