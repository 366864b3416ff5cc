from app.routers.dashboard import router as dashboard_router
from app.routers.health import router as health_router
from app.routers.inventory import router as inventory_router
from app.routers.transactions import router as transactions_router

__all__ = [
    "dashboard_router",
    "health_router",
    "inventory_router",
    "transactions_router",
]
