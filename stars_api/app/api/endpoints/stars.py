"""
Star endpoints.

These routes expose a CRUD API for stars.  A star is addressed by its
name, which may itself contain slashes: everything after ``/stars/``
is taken as the name.  Request payloads are form-encoded, responses
are JSON.

Unknown names are not errors.  Reading one yields an all-empty record
(or 404 when ``STRICT_NOT_FOUND`` is set), while updating or deleting
one is a successful no-op.
"""

from typing import List
from urllib.parse import quote, urljoin

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from stars_api.app.api.dependencies import get_settings, get_star_service, star_form, star_name
from stars_api.app.core.config import Settings
from stars_api.app.core.exceptions import DuplicateStarError
from stars_api.app.schemas.star import StarForm, StarRead
from stars_api.app.services.star_service import StarService

router = APIRouter()


def star_location(request: Request, name: str) -> str:
    """Absolute URL of the star ``name``, resolved against the request URL."""
    return urljoin(str(request.url), "/stars/" + quote(name, safe="/"))


@router.get("", response_model=List[StarRead])
async def list_stars(service: StarService = Depends(get_star_service)) -> List[StarRead]:
    """Return every star in creation order."""
    return await service.list_stars()


@router.get("/{name:path}", response_model=StarRead)
async def get_star(
    name: str = Depends(star_name),
    service: StarService = Depends(get_star_service),
    settings: Settings = Depends(get_settings),
) -> StarRead:
    """Retrieve a single star by name.

    A missing star is returned as a record with all fields empty,
    unless strict not-found handling is enabled.
    """
    star = await service.get_star(name)
    if star is None:
        if settings.strict_not_found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Star not found")
        return StarRead()
    return star


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_star(
    request: Request,
    star_in: StarForm = Depends(star_form),
    service: StarService = Depends(get_star_service),
) -> Response:
    """Create a new star and point ``Location`` at it.

    An empty name could never be addressed under ``/stars/``, so it is
    rejected with 400.
    """
    if not star_in.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Star name is required")
    try:
        star = await service.create_star(star_in)
    except DuplicateStarError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": star_location(request, star.name)},
    )


@router.put("/{name:path}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_star(
    name: str = Depends(star_name),
    star_in: StarForm = Depends(star_form),
    service: StarService = Depends(get_star_service),
) -> Response:
    """Overwrite the star at ``name``; the form ``name`` renames it."""
    try:
        await service.update_star(name, star_in)
    except DuplicateStarError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{name:path}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_star(
    name: str = Depends(star_name),
    service: StarService = Depends(get_star_service),
) -> Response:
    """Delete a star; deleting a missing star also succeeds."""
    await service.delete_star(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
