"""
Router package for the Program API.

- health: Liveness endpoint
- programs: Read and edit gym programs
- program_progress: Program progression (start, advance, previous, jump, reset)
"""

from api.routers.health import router as health_router
from api.routers.programs import router as programs_router
from api.routers.program_progress import router as program_progress_router

__all__ = [
    "health_router",
    "programs_router",
    "program_progress_router",
]
