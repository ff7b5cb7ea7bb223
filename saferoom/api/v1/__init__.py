from .health_controller import router as health_router
from .analysis_controller import router as analysis_router


__all__ = ["health_router", "analysis_router"]
