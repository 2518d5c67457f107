"""
POST /paths/*
=============
HTTP surface over the path resolver.

Routes:
    POST /paths/absolute   — absolute form of a path
    POST /paths/relative   — relative path between two locations
    POST /paths/normalize  — unify separators
    POST /paths/convert    — windows / unix / os style conversion
    POST /paths/classify   — absolute/relative and ancestor/descendant flags

Every route is a pure computation; the only failure mode is a missing
working directory when a relative path must be anchored (HTTP 500).
"""
import logging

from fastapi import APIRouter, HTTPException

from path_helper.core.constants import STYLE_UNIX, STYLE_WINDOWS
from path_helper.core.errors import WorkingDirectoryError
from path_helper.models.path_request import (
    AbsoluteRequest,
    ClassifyRequest,
    ClassifyResponse,
    ConvertRequest,
    NormalizeRequest,
    PathResponse,
    RelativeRequest,
)
from path_helper.resolver.path_resolver import PathResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths", tags=["Paths"])

# Shared resolver; replaced in tests to pin the working directory
_resolver = PathResolver()


def _working_directory_failure(exc: WorkingDirectoryError) -> HTTPException:
    logger.error(f"[API] Working directory unavailable: {exc}")
    return HTTPException(status_code=500, detail=f"Working directory unavailable: {exc}")


@router.post("/absolute", response_model=PathResponse)
async def absolute_path(request: AbsoluteRequest):
    try:
        result = _resolver.absolute(request.path, request.separator)
    except WorkingDirectoryError as exc:
        raise _working_directory_failure(exc)
    logger.info(f"[API] absolute {request.path!r} -> {result!r}")
    return PathResponse(path=result)


@router.post("/relative", response_model=PathResponse)
async def relative_path(request: RelativeRequest):
    try:
        result = _resolver.relative(
            request.from_path, request.to_path, request.separator, request.strategy
        )
    except WorkingDirectoryError as exc:
        raise _working_directory_failure(exc)
    logger.info(f"[API] relative {request.from_path!r} -> {request.to_path!r} = {result!r}")
    return PathResponse(path=result)


@router.post("/normalize", response_model=PathResponse)
async def normalize_path(request: NormalizeRequest):
    return PathResponse(path=_resolver.normalize(request.path, request.separator))


@router.post("/convert", response_model=PathResponse)
async def convert_path(request: ConvertRequest):
    if request.style == STYLE_WINDOWS:
        result = _resolver.to_windows_style(request.path)
    elif request.style == STYLE_UNIX:
        result = _resolver.to_unix_style(request.path)
    else:
        result = _resolver.to_os_style(request.path)
    return PathResponse(path=result)


@router.post("/classify", response_model=ClassifyResponse)
async def classify_path(request: ClassifyRequest):
    """
    Classify a path, and optionally relate it to a comparison path.

    is_descendant / is_ancestor are only filled when `comparison` is given.
    """
    response = ClassifyResponse(
        path=request.path,
        is_absolute=_resolver.is_absolute(request.path),
        is_relative=_resolver.is_relative(request.path),
    )
    if request.comparison is None:
        return response

    try:
        response.is_descendant = _resolver.is_descendant(
            request.path, request.comparison, request.component_aware
        )
        response.is_ancestor = _resolver.is_ancestor(
            request.path, request.comparison, request.component_aware
        )
    except WorkingDirectoryError as exc:
        raise _working_directory_failure(exc)
    return response
