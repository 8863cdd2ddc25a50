# barbershop/routers/services_routes.py

from fastapi import APIRouter, Depends

from barbershop.deps import get_catalog
from barbershop.errors import NotFoundError
from barbershop.repository import ServiceCatalog
from barbershop.schemas import ServicePublic

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=list[ServicePublic])
def list_services(catalog: ServiceCatalog = Depends(get_catalog)):
    return catalog.list_all()


@router.get("/{service_id}", response_model=ServicePublic)
def get_service(service_id: int, catalog: ServiceCatalog = Depends(get_catalog)):
    service = catalog.find_by_id(service_id)
    if service is None:
        raise NotFoundError("Service not found")
    return service
