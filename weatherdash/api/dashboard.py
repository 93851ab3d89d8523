# weatherdash/api/dashboard.py
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from weatherdash.core.deps import get_db
from weatherdash.core.errors import BadRequest
from weatherdash.core.templates import render
from weatherdash.schemas.dashboard import AddDeviceForm, DevicesView
from weatherdash.services import device_service

router = APIRouter(tags=["dashboard"], default_response_class=HTMLResponse)


def _devices_page(request: Request, db: Session, status_code: int = status.HTTP_200_OK):
    view = DevicesView(devices=device_service.list_device_statuses(db))
    return render(request, "devices.html", view, status_code=status_code)


@router.get("/")
def dashboard(request: Request):
    return render(request, "layout.html")


@router.get("/devices")
def devices(request: Request, db: Session = Depends(get_db)):
    return _devices_page(request, db)


@router.get("/device/new")
def add_device_form(request: Request):
    return render(request, "add_device.html", AddDeviceForm())


@router.post("/device")
def create_device(
    request: Request,
    device_id: str = Form(""),
    location: str = Form(""),
    db: Session = Depends(get_db),
):
    """
    Creates a device from the add-device form and returns the updated list.
    Validation errors re-render the form with the message (400); layout.html
    lets htmx swap that response into the page.
    """
    try:
        device_service.create_device(db, device_id, location)
    except BadRequest as e:
        form = AddDeviceForm(device_id=device_id, location=location, error=e.detail)
        return render(request, "add_device.html", form, status_code=e.status_code)

    return _devices_page(request, db, status_code=status.HTTP_201_CREATED)


@router.get("/device/{device_id}")
def device_detail(request: Request, device_id: str, db: Session = Depends(get_db)):
    view = device_service.get_device_detail(db, device_id)
    return render(request, "device.html", view)


@router.delete("/device/{device_id}")
def delete_device(request: Request, device_id: str, db: Session = Depends(get_db)):
    device_service.delete_device(db, device_id)
    return _devices_page(request, db)
