"""
FastAPI dependencies shared by the developer endpoints.

``get_repository`` hands out the repository that ``create_app`` stored
on ``app.state``.  ``resolve_developer`` turns the ``{developer_id}``
path segment into a stored record or aborts with HTTP 404 before the
route body runs.  ``read_developer_fields`` collects ``name`` and
``fav_lang`` from the request without validating them.
"""

import re
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status

from developer_api.app.schemas.developer import DeveloperInput, DeveloperRead
from developer_api.app.services.developer_service import DeveloperRepository


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
ID_PATTERN = re.compile(r"0|-?[1-9][0-9]*")
SQLITE_MIN_INT = -(2 ** 63)
SQLITE_MAX_INT = 2 ** 63 - 1


def get_repository(request: Request) -> DeveloperRepository:
    """Return the repository the application was built with."""
    return request.app.state.repository


async def resolve_developer(
    developer_id: str,
    repository: DeveloperRepository = Depends(get_repository),
) -> DeveloperRead:
    """Look up the developer addressed by the path or raise 404.

    Only plain decimal ids within SQLite's 64-bit integer range can
    match a row; anything else is reported as not found rather than
    as a validation error.
    """
    pk = parse_developer_id(developer_id)
    developer = await repository.find_by_id(pk) if pk is not None else None
    if developer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Developer not found")
    return developer


def parse_developer_id(developer_id: str) -> Optional[int]:
    """Return ``developer_id`` as an int, or ``None`` if no row can have it."""
    if not ID_PATTERN.fullmatch(developer_id):
        return None
    pk = int(developer_id)
    if not SQLITE_MIN_INT <= pk <= SQLITE_MAX_INT:
        return None
    return pk


async def read_developer_fields(request: Request) -> DeveloperInput:
    """Collect ``name`` and ``fav_lang`` from the query string and body.

    JSON objects and form-encoded bodies are understood; body values
    override query parameters.  Anything unparseable is ignored so the
    fields simply end up as ``None``.
    """
    fields: Dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            fields.update(body)
    elif content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        fields.update(form)
    return DeveloperInput(
        name=_as_text(fields.get("name")),
        fav_lang=_as_text(fields.get("fav_lang")),
    )


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)
