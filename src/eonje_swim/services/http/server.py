from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...api import ApiFunction, call_api, get_api_functions
from ...errors import CalendarNotFoundError, EonjeSwimError, RemoteStoreError

logger = logging.getLogger(__name__)

app = FastAPI(title="Eonje Swim API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "parameters": api_function.parameters,
    }


@app.get("/api/functions")
async def list_api_functions() -> JSONResponse:
    functions = [_serialize_api_function(func) for func in get_api_functions()]
    return JSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    known = {func.name for func in get_api_functions()}
    if function_name not in known:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=f"API function '{function_name}' is not registered.")
    try:
        result = call_api(function_name, **request.arguments)
    except CalendarNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except RemoteStoreError as exc:
        logger.error("API function %s failed against the backend: %s", function_name, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except (EonjeSwimError, TypeError, ValueError) as exc:
        logger.info("API function %s rejected its arguments: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Eonje Swim API on %s:%s", host, port)
    asyncio.run(serve(app, config))
