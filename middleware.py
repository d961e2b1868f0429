# middleware.py
from fastapi import Request, Response
from starlette.status import HTTP_204_NO_CONTENT

API_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": "Content-Type",
    "Content-Type": "application/json",
}


async def add_api_headers(request: Request, call_next) -> Response:
    """
    Sets CORS and content-type headers on every response.
    OPTIONS is answered here with 204 and never reaches the routers.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=HTTP_204_NO_CONTENT)
    else:
        response = await call_next(request)

    for name, value in API_HEADERS.items():
        response.headers[name] = value
    return response
