"""Paste API: thin routes delegating to PasteService.

Routes sit at the application root so paste URLs stay short
(/{key}/{file_name}). Error kinds raised by the service are turned into
status codes by pastebox.core.exception_handlers.
"""

import mimetypes
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import RedirectResponse
from starlette.datastructures import UploadFile

from pastebox.api.dependencies import get_paste_query_service, get_paste_service
from pastebox.application.use_cases.pastes import PasteService
from pastebox.core.config import get_settings
from pastebox.domain.exceptions import (
    MissingFileContentTypeException,
    MissingFileException,
    MissingFileNameException,
)
from pastebox.schemas.paste import ErrorResponse, PasteUploadResponse

router = APIRouter()


def _paste_path(key: str, file_name: str) -> str:
    return f"/{key}/{quote(file_name, safe='')}"


@router.post(
    "/",
    response_model=PasteUploadResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 507: {"model": ErrorResponse}},
)
async def upload_paste(
    request: Request,
    response: Response,
    service: Annotated[PasteService, Depends(get_paste_service)],
) -> PasteUploadResponse:
    """Upload a paste as multipart/form-data. Only the first field is used."""
    async with request.form() as form:
        items = form.multi_items()
        if not items:
            raise MissingFileException()
        _, upload = items[0]
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise MissingFileNameException()
        if not upload.content_type:
            raise MissingFileContentTypeException()
        file_name = upload.filename
        record = await service.create(file_name, upload.file)

    path = _paste_path(record.key, file_name)
    response.headers["Location"] = path
    return PasteUploadResponse(
        id=record.key,
        url=f"{get_settings().base_url.rstrip('/')}{path}",
        delete_key=record.delete_key,
    )


@router.get(
    "/{key}",
    status_code=308,
    response_class=RedirectResponse,
    responses={404: {"model": ErrorResponse}},
)
async def redirect_paste(
    key: str,
    service: Annotated[PasteService, Depends(get_paste_query_service)],
) -> RedirectResponse:
    """Redirect to the canonical URL that carries the file name."""
    record = await service.get_record(key)
    return RedirectResponse(_paste_path(record.key, record.file_name), status_code=308)


@router.get("/{key}/{file_name}", responses={404: {"model": ErrorResponse}})
async def get_paste(
    key: str,
    file_name: str,
    service: Annotated[PasteService, Depends(get_paste_query_service)],
) -> Response:
    """Return paste content. The file name segment is cosmetic; the key alone selects the paste."""
    record, data = await service.open(key)
    media_type, _ = mimetypes.guess_type(record.file_name)
    return Response(
        content=data,
        media_type=media_type or "application/octet-stream",
        headers={
            "Content-Disposition": f"inline; filename*=UTF-8''{quote(record.file_name, safe='')}"
        },
    )


@router.delete(
    "/{key}",
    status_code=200,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_paste(
    key: str,
    service: Annotated[PasteService, Depends(get_paste_service)],
    delete_key: Annotated[str | None, Query()] = None,
) -> Response:
    """Delete a paste using the delete key returned at upload."""
    await service.delete(key, delete_key)
    return Response(status_code=200)
