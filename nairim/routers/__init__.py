from nairim.routers.properties import router as properties_router
from nairim.routers.owners import router as owners_router
from nairim.routers.tenants import router as tenants_router
from nairim.routers.agencies import router as agencies_router
from nairim.routers.leases import router as leases_router
from nairim.routers.property_types import router as property_types_router
from nairim.routers.users import router as users_router
from nairim.routers.favorites import router as favorites_router
from nairim.routers.dashboard import router as dashboard_router

__all__ = [
    "properties_router", "owners_router", "tenants_router", "agencies_router",
    "leases_router", "property_types_router", "users_router", "favorites_router", "dashboard_router",
]
