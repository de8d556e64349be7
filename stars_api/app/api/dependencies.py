"""
FastAPI dependencies shared by the stars endpoints.

The service and settings are attached to ``app.state`` by
``create_app``; these helpers fetch them for each request so route
functions never touch module-level state.
"""

from fastapi import Form, HTTPException, Request, status

from stars_api.app.core.config import Settings
from stars_api.app.schemas.star import StarForm
from stars_api.app.services.star_service import StarService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_star_service(request: Request) -> StarService:
    return request.app.state.star_service


def star_name(name: str) -> str:
    """Path name of a star; everything after ``/stars/``, slashes included.

    ``/stars/`` with nothing after it is not a star path.
    """
    if not name:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return name


async def star_form(
    form_name: str = Form("", alias="name"),
    description: str = Form(""),
    url: str = Form(""),
) -> StarForm:
    """Read the form-encoded star payload; absent fields become empty strings."""
    # The form field is aliased because ``name`` is also the path
    # parameter on ``PUT /stars/{name}``.
    return StarForm(name=form_name, description=description, url=url)
