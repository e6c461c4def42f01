from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from .schemas import ErrorResponse, Scholarship
from .store import ScholarshipStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Scholarships"])

JSON_CONTENT_TYPE = "application/json"

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ErrorResponse},
}


def name_from_path(path: str) -> Optional[str]:
    """Return the record identifier in ``/scholarships/<name>``.

    Only a path splitting into exactly three parts on ``/`` carries an
    identifier; anything else (``/scholarships``, ``/scholarships/a/b``)
    means none was supplied.  ``/scholarships/`` yields ``""``.
    """
    parts = path.split("/")
    if len(parts) != 3:
        return None
    return parts[-1]


def _respond(status_code: int, payload: Any) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code)


def _require_name(request: Request) -> str:
    name = name_from_path(request.url.path)
    if name is None:
        raise HTTPException(status_code=404, detail="not found")
    return name


def _has_json_content_type(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_CONTENT_TYPE


async def _read_scholarship(request: Request) -> Scholarship:
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.warning("Client disconnected while sending %s %s", request.method, request.url.path)
        raise HTTPException(status_code=500, detail="failed to read request body")

    if not _has_json_content_type(request):
        raise HTTPException(
            status_code=415, detail="content type `application/json` required"
        )

    try:
        return Scholarship.model_validate_json(body)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise HTTPException(status_code=400, detail=detail)


@router.get("/scholarships", summary="List scholarships")
@router.get("/scholarships/{identifier:path}", summary="Get a scholarship")
async def read_scholarships(
    request: Request, store: ScholarshipStore = Depends(get_store)
) -> JSONResponse:
    name = name_from_path(request.url.path)
    found = await store.read(name)
    if isinstance(found, Scholarship):
        return _respond(status.HTTP_200_OK, found.to_json())
    return _respond(
        status.HTTP_200_OK, {key: value.to_json() for key, value in found.items()}
    )


@router.post(
    "/scholarships",
    status_code=status.HTTP_201_CREATED,
    summary="Create a scholarship",
    responses=_ERRORS,
)
@router.post(
    "/scholarships/{identifier:path}",
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_scholarship(
    request: Request, store: ScholarshipStore = Depends(get_store)
) -> JSONResponse:
    scholarship = await _read_scholarship(request)
    created = await store.create(scholarship)
    return _respond(status.HTTP_201_CREATED, created.to_json())


@router.api_route(
    "/scholarships",
    methods=["PUT", "PATCH"],
    include_in_schema=False,
)
@router.api_route(
    "/scholarships/{identifier:path}",
    methods=["PUT", "PATCH"],
    summary="Replace a scholarship",
    responses=_ERRORS,
)
async def update_scholarship(
    request: Request, store: ScholarshipStore = Depends(get_store)
) -> JSONResponse:
    name = _require_name(request)
    scholarship = await _read_scholarship(request)
    current = await store.update(name, scholarship)
    if current is None:
        raise HTTPException(status_code=404, detail="not found")
    return _respond(status.HTTP_200_OK, current.to_json())


@router.delete("/scholarships", include_in_schema=False)
@router.delete(
    "/scholarships/{identifier:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a scholarship",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_scholarship(
    request: Request, store: ScholarshipStore = Depends(get_store)
) -> Response:
    name = _require_name(request)
    if not await store.delete(name):
        raise HTTPException(status_code=404, detail="not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
