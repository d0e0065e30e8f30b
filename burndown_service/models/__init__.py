# Burndown Service API Models
from .requests import BurndownRequest
from .responses import BurndownResponse, HealthResponse

__all__ = ["BurndownRequest", "BurndownResponse", "HealthResponse"]
