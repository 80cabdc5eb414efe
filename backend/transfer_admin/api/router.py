from fastapi import APIRouter

from transfer_admin.api.routes import health, auth, reservations, accounting, drivers, vehicles, pages

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])  # POST /login, /register
api_router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])  # GET/POST /, PUT/DELETE /{id}
api_router.include_router(accounting.router, prefix="/accounting", tags=["accounting"])  # GET/POST /
api_router.include_router(drivers.router, prefix="/drivers", tags=["fleet"])  # GET/POST /
api_router.include_router(vehicles.router, prefix="/vehicles", tags=["fleet"])  # GET/POST /
api_router.include_router(pages.router, tags=["ui"])  # HTML admin panel and public form
