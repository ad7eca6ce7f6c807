"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter that the app factory includes under the
configured prefix, plus whatever HTTP translation of service errors it needs.
"""
