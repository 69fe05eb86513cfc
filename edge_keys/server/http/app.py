"""HTTP application wiring for cache header previews."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response

from ..._query import QueryShapeError
from ..response_headers import ResponseHeaders, build_response_headers
from ..settings import HeaderSettings
from .models import HeaderPreviewResponse, HeaderSettingsResponse, QueryResultPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderRuntimeState:
    """Objects shared across HTTP handlers."""

    settings: HeaderSettings


def create_header_app(settings: HeaderSettings | None = None) -> FastAPI:
    """Create a FastAPI app exposing header preview routes."""

    app = FastAPI()
    app.state.header_state = HeaderRuntimeState(settings=settings or HeaderSettings())
    app.include_router(create_header_router())
    return app


def create_header_router() -> APIRouter:
    """Build a router that computes and applies edge cache headers."""

    router = APIRouter()

    @router.post(
        "/headers/preview",
        name="headers-preview",
        response_model=HeaderPreviewResponse,
        summary="Compute Cache-Control and surrogate key headers for a query result",
    )
    def preview_headers(
        payload: QueryResultPayload,
        response: Response,
        state: HeaderRuntimeState = Depends(_get_header_state),
    ) -> HeaderPreviewResponse:
        try:
            query = payload.to_query()
        except QueryShapeError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        headers = build_response_headers(query, state.settings, payload.to_source())
        apply_response_headers(response, headers)
        return HeaderPreviewResponse.from_headers(headers)

    @router.get(
        "/headers/settings",
        name="headers-settings",
        response_model=HeaderSettingsResponse,
        summary="Inspect the header settings in effect",
    )
    def read_settings(
        state: HeaderRuntimeState = Depends(_get_header_state),
    ) -> HeaderSettingsResponse:
        return HeaderSettingsResponse.from_settings(state.settings)

    return router


def apply_response_headers(response: Response, headers: ResponseHeaders) -> None:
    """Copy computed header values onto ``response``."""

    values: Mapping[str, str] = headers.as_headers()
    for name, value in values.items():
        response.headers[name] = value
    logger.debug("Applied edge headers: %s", ", ".join(values) or "none")


def _get_header_state(request: Request) -> HeaderRuntimeState:
    state = getattr(request.app.state, "header_state", None)
    if state is None:
        raise RuntimeError("Header runtime state is not configured")
    return state


__all__ = ["apply_response_headers", "create_header_app", "create_header_router"]
