"""API route handlers."""

from .matches import router as matches_router
from .weights import router as weights_router
