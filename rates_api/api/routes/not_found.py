"""Not-Found Route — catch-all for every method on every unmatched path.

Invariants:
    - Must be registered last so defined routes always match first
    - No method filter: unknown verbs (TRACE, PROPFIND, ...) also get 404, never 405
    - 404 fail envelope embedding the original URL (path + query) and the host name

Design Decisions:
    - Plain Starlette Route (methods=None) appended to the app router: APIRouter
      routes always carry a method set
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.routing import Route


def original_url(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def request_hostname(request: Request) -> str:
    """Host name from the Host header, without port."""
    if request.url.hostname:
        return request.url.hostname
    return request.headers.get("host", "").split(":")[0]


async def not_found(request: Request):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "status": "fail",
            "message": (
                f"Can't find {original_url(request)} on this server. "
                f"Try a get or post request to {request_hostname(request)}"
            ),
        },
    )


def register_not_found(app: FastAPI) -> None:
    """Append the catch-all route after every defined route."""
    app.router.routes.append(
        Route(
            "/{full_path:path}",
            endpoint=not_found,
            methods=None,
            include_in_schema=False,
        ),
    )
