"""FastAPI route handlers."""

from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from core.exceptions import RelayError, UpstreamError
from core.routes import RouteSpec

Handler = Callable[[Request], Awaitable[JSONResponse]]


def _read_input(request: Request, route: RouteSpec) -> str | None:
    """Read the route's single input; an empty value counts as missing."""
    if route.source == "path":
        value = request.path_params.get(route.input_name)
    else:
        value = request.query_params.get(route.input_name)
    return value or route.default


def build_handler(route: RouteSpec) -> Handler:
    """Build the validate -> forward -> respond endpoint for one route."""

    async def handler(request: Request) -> JSONResponse:
        value = _read_input(request, route)
        if not value:
            return JSONResponse({"error": route.missing_message}, status_code=400)

        upstream = request.app.state.upstream_client
        try:
            data = await upstream.fetch(route.build_request(value))
        except UpstreamError as e:
            return JSONResponse(
                {"error": e.message, "details": e.details},
                status_code=e.status_code or 500,
            )
        except RelayError as e:
            return JSONResponse({"error": str(e)}, status_code=500)

        return JSONResponse(data, status_code=200)

    handler.__name__ = f"relay_{route.name}"
    return handler


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for failures outside the relay's own error types."""
    message = str(exc) or "Internal server error."
    request.app.state.logger.log_error(request.url.path, 500, message)
    return JSONResponse({"error": message}, status_code=500)
