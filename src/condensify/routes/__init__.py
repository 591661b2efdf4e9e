from condensify.routes.email import router as email_router
from condensify.routes.health import router as health_router
from condensify.routes.summary import router as summary_router

__all__ = ["email_router", "health_router", "summary_router"]
