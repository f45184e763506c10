# barberapp/routers/services_routes.py

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from barberapp.admin import AdminServiceManager
from barberapp.auth import get_current_admin
from barberapp.catalog import ServiceCatalog, services_by_category
from barberapp.deps import get_catalog, get_locale, http_error, validation_error
from barberapp.errors import BarberAppError, ServiceValidationError
from barberapp.formatting import format_currency
from barberapp.i18n import Message, Notification, render_notification
from barberapp.schemas import ServiceActionResponse, ServiceCategoryGroup, ServicePublic, ServiceView

router = APIRouter(
    tags=["services"],
)


def service_view(service: ServicePublic, locale: str) -> ServiceView:
    return ServiceView(**service.model_dump(), price_display=format_currency(service.price, locale))


def fetch_failed(exc: BarberAppError, locale: str):
    notification = Notification(
        Message("admin_service.fetch_error_title"),
        Message("admin_service.fetch_error_desc"),
        "destructive",
    )
    return http_error(notification, exc, locale)


def action_response(result, locale: str) -> dict:
    if not result.ok:
        raise http_error(result.notification, result.error, locale)
    return {
        "service": result.record,
        "notification": render_notification(result.notification, locale),
    }


@router.get("/services", response_model=List[ServiceCategoryGroup])
async def list_public_services(
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
):
    try:
        services = await catalog.list_active_services()
    except BarberAppError as exc:
        raise fetch_failed(exc, locale)

    return [
        {
            "key": key,
            "name": group["name"],
            "services": [service_view(s, locale) for s in group["services"]],
        }
        for key, group in services_by_category(services).items()
    ]


@router.get("/admin/services", response_model=List[ServiceView])
async def list_admin_services(
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    try:
        services = await catalog.list_services()
    except BarberAppError as exc:
        raise fetch_failed(exc, locale)
    return [service_view(s, locale) for s in services]


@router.post("/admin/services", response_model=ServiceActionResponse, status_code=201)
async def create_service(
    form: Dict[str, Any] = Body(...),
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    manager = AdminServiceManager(catalog)
    try:
        result = await manager.submit(form)
    except ServiceValidationError as exc:
        raise validation_error(exc, locale)
    return action_response(result, locale)


@router.patch("/admin/services/{service_id}", response_model=ServiceActionResponse)
async def edit_service(
    service_id: str,
    form: Dict[str, Any] = Body(...),
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    manager = AdminServiceManager(catalog)
    try:
        result = await manager.submit(form, editing_id=service_id)
    except ServiceValidationError as exc:
        raise validation_error(exc, locale)
    return action_response(result, locale)


@router.post("/admin/services/{service_id}/toggle", response_model=ServiceActionResponse)
async def toggle_service(
    service_id: str,
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    manager = AdminServiceManager(catalog)
    notification = await manager.refresh()
    if notification is not None:
        raise http_error(notification, None, locale)
    return action_response(await manager.toggle(service_id), locale)


@router.delete("/admin/services/{service_id}", response_model=ServiceActionResponse)
async def delete_service(
    service_id: str,
    catalog: ServiceCatalog = Depends(get_catalog),
    locale: str = Depends(get_locale),
    admin: dict = Depends(get_current_admin),
):
    manager = AdminServiceManager(catalog)
    notification = await manager.refresh()
    if notification is not None:
        raise http_error(notification, None, locale)
    return action_response(await manager.delete(service_id), locale)
