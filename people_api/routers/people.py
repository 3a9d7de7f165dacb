from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from people_api.domain.errors import (
    DecodeError,
    EncodeError,
    InvalidKey,
    NotFound,
    StorageIOError,
    StoreError,
)
from people_api.domain.people import parse_key, person_from_json
from people_api.repositories.json_storage import PeopleStore

logger = logging.getLogger(__name__)

STRICT_STATUS = {
    InvalidKey: 400,
    NotFound: 404,
}

PersonId = Annotated[str, Path(description="person id, a decimal integer")]

_PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "firstName": {"type": "string"},
        "secondName": {"type": "string"},
        "age": {"type": "integer"},
    },
}


def status_for(exc: StoreError, *, strict: bool, from_body: bool = False) -> int:
    """Map an error kind to an HTTP status; collapsed mode answers 500 for everything."""
    if not strict:
        return 500
    if from_body and isinstance(exc, DecodeError):
        return 400
    for kind, status_code in STRICT_STATUS.items():
        if isinstance(exc, kind):
            return status_code
    return 500


def create_router(store: PeopleStore, *, strict_status: bool = False) -> APIRouter:
    """Build the /people router bound to one store instance."""
    router = APIRouter(prefix="/people", tags=["people"])

    def _error_response(request: Request, exc: StoreError, *, from_body: bool = False) -> Response:
        status_code = status_for(exc, strict=strict_status, from_body=from_body)
        log = logger.error if isinstance(exc, (StorageIOError, EncodeError)) else logger.warning
        log(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            extra={"path": request.url.path, "error_code": exc.code},
        )
        if not strict_status:
            return Response(status_code=status_code)
        return JSONResponse({"ok": False, "error": exc.code, "message": exc.message}, status_code=status_code)

    @router.get(
        "/{id}",
        operation_id="getPerson",
        summary="Returns a person with specified id",
        responses={
            200: {"description": "person response", "content": {"application/json": {"schema": _PERSON_SCHEMA}}},
            500: {"description": "any error"},
        },
    )
    async def get_person(request: Request, id: PersonId) -> Response:
        try:
            key = parse_key(id)
            person = await run_in_threadpool(store.get, key)
        except StoreError as exc:
            return _error_response(request, exc)
        return Response(content=person.to_json(), media_type="application/json")

    @router.post(
        "/{id}",
        operation_id="setPerson",
        summary="Sets person with specified id",
        responses={200: {"description": "person stored"}, 500: {"description": "any error"}},
        openapi_extra={
            "requestBody": {"required": True, "content": {"application/json": {"schema": _PERSON_SCHEMA}}},
        },
    )
    async def set_person(request: Request, id: PersonId) -> Response:
        try:
            key = parse_key(id)
        except StoreError as exc:
            return _error_response(request, exc)
        try:
            person = person_from_json(await request.body())
        except StoreError as exc:
            return _error_response(request, exc, from_body=True)
        try:
            await run_in_threadpool(store.set, key, person)
        except StoreError as exc:
            return _error_response(request, exc)
        return Response(status_code=200)

    @router.delete(
        "/{id}",
        operation_id="removePerson",
        summary="Removes person with specified id",
        responses={200: {"description": "person removed"}, 500: {"description": "any error"}},
    )
    async def remove_person(request: Request, id: PersonId) -> Response:
        try:
            key = parse_key(id)
            await run_in_threadpool(store.remove, key)
        except StoreError as exc:
            return _error_response(request, exc)
        return Response(status_code=200)

    return router
