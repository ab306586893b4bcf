"""HTTP error mapping for storefront routers.

Protean's handlers turn ``ValidationError`` (and every storefront business
error derived from it) into 400 responses. Missing records become 404 and
authorization failures 403.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers

from storefront.shared.errors import Unauthorized


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc) or "Not found"})


async def _forbidden(request: Request, exc: Unauthorized) -> JSONResponse:
    return JSONResponse(status_code=403, content={"error": exc.messages})


def register_storefront_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(Unauthorized, _forbidden)
