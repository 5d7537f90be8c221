# app/api/v1/router.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.config.settings import settings

from app.modules.localities import localities_router, carries_router
from app.modules.sellers import sellers_router
from app.modules.carriers import carriers_router
from app.modules.warehouses import warehouses_router
from app.modules.sections import sections_router
from app.modules.products import products_router
from app.modules.product_records import product_records_router
from app.modules.product_batches import product_batches_router
from app.modules.employees import employees_router
from app.modules.inbound_orders import inbound_orders_router
from app.modules.buyers import buyers_router
from app.modules.purchase_orders import purchase_orders_router


# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# ==================== MÓDULOS ====================

MODULES = [
    (localities_router, "/localities", "Localities"),
    (sellers_router, "/sellers", "Sellers"),
    (carriers_router, "/carriers", "Carriers"),
    (warehouses_router, "/warehouses", "Warehouses"),
    (sections_router, "/sections", "Sections"),
    (products_router, "/products", "Products"),
    (product_records_router, "/productRecords", "Product Records"),
    (product_batches_router, "/productBatches", "Product Batches"),
    (employees_router, "/employees", "Employees"),
    (inbound_orders_router, "/inboundOrders", "Inbound Orders"),
    (buyers_router, "/buyers", "Buyers"),
    (purchase_orders_router, "/purchaseOrders", "Purchase Orders"),
]

for module_router, prefix, tag in MODULES:
    api_router.include_router(module_router, prefix=prefix, tags=[tag])

# Ruta histórica /carries/reportCarries
api_router.include_router(carries_router, prefix="/carries", tags=["Localities"])

# ==================== ENDPOINTS RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": "Mercado Fresh API v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            tag.lower().replace(" ", "_"): f"/api/v1{prefix}"
            for _, prefix, tag in MODULES
        }
    }

@api_router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: verifica la conexión a la base de datos"""
    db.execute(text("SELECT 1"))
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "database": "connected"
    }
