# Burndown Service Routers
from .burndown import router as burndown_router
