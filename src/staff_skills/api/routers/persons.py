"""
staff_skills.api.routers.persons

CRUD endpoints for persons and their skills.

Responsibilities:
- Translate HTTP requests into `PersonService` calls.
- Map service outcomes to status codes: None/False -> 404, validation -> 400.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)

from staff_skills.api.deps import person_service
from staff_skills.schemas import PersonRequest, PersonResponse
from staff_skills.services.person_service import PersonService
from staff_skills.services.validation import PersonValidationError

router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


def _not_found(person_id: int) -> HTTPException:
    return HTTPException(status_code=HTTP_404_NOT_FOUND, detail=f"Person {person_id} not found")


@router.get("", response_model=list[PersonResponse])
async def list_persons(svc: PersonService = Depends(person_service)) -> list[PersonResponse]:
    return await svc.list_all()


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: int,
    svc: PersonService = Depends(person_service),
) -> PersonResponse:
    person = await svc.get(person_id)
    if person is None:
        raise _not_found(person_id)
    return person


@router.post("", response_model=PersonResponse, status_code=HTTP_201_CREATED)
async def create_person(
    request: Request,
    response: Response,
    body: PersonRequest,
    svc: PersonService = Depends(person_service),
) -> PersonResponse:
    try:
        person = await svc.create(body)
    except PersonValidationError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    response.headers["Location"] = request.url_for("get_person", person_id=person.id).path
    return person


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: int,
    body: PersonRequest,
    svc: PersonService = Depends(person_service),
) -> PersonResponse:
    try:
        person = await svc.update(person_id, body)
    except PersonValidationError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if person is None:
        raise _not_found(person_id)
    return person


@router.delete("/{person_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int,
    svc: PersonService = Depends(person_service),
) -> Response:
    if not await svc.delete(person_id):
        raise _not_found(person_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


# --- Module Notes -----------------------------------------------------------
# PUT answers 200 with the updated record so clients need no follow-up GET.
