from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import ApiFunction, call_api, get_api_functions
from ...config import ServerSettings, get_settings
from ...security import TransportGuardMiddleware
from ...validation import ToolArgumentError
from ..calendar import CalendarProviderNotConfiguredError

logger = logging.getLogger(__name__)

LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "parameters": api_function.parameter_schema,
    }


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or get_settings().server
    app = FastAPI(title="Calendar Tools Local API", version="0.3.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=LOCAL_ORIGIN_REGEX,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )
    # Added last so it runs first, ahead of CORS handling.
    app.add_middleware(TransportGuardMiddleware, auth_token=settings.auth_token)

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.get("/api/functions")
    async def list_api_functions() -> JSONResponse:
        functions = [_serialize_api_function(func) for func in get_api_functions()]
        return JSONResponse({"functions": functions})

    @app.post("/api/functions/{function_name}")
    async def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
        try:
            result = call_api(function_name, **request.arguments)
        except KeyError as exc:
            logger.warning("API function not found: %s", function_name)
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ToolArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CalendarProviderNotConfiguredError as exc:
            logger.error("API function %s called without a calendar provider", function_name)
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("API function %s failed", function_name)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        logger.debug("API function %s executed successfully", function_name)
        return JSONResponse({"name": function_name, "result": result})

    return app


def run_local_server(host: str = "127.0.0.1", port: int = 8000, settings: Optional[ServerSettings] = None) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    settings = settings or get_settings().server
    if not settings.auth_enabled:
        logger.warning("MCP_AUTH_TOKEN is not set; the API accepts unauthenticated local requests.")

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving calendar tools API on http://%s:%s", host, port)
    asyncio.run(serve(create_app(settings), config))
