"""
Local host for the Lambda handler.

This module exposes a FastAPI application that accepts any method on any
path, converts the request into an API Gateway proxy event and invokes
``lambda_handler`` in-process. It stands in for API Gateway during contract
verification (through httpx's ASGI transport) and local development
(``fullname-serve``).
"""

import base64
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request, Response

from fullname_api.core.config import settings
from fullname_api.presentation.lambda_context import LocalLambdaContext
from fullname_api.presentation.lambda_handler import lambda_handler

_FORWARDED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


app = FastAPI(
    title=settings.app_name,
    description="Local host for the full name Lambda function",
    version=settings.app_version,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    debug=settings.debug,
)


async def build_proxy_event(request: Request) -> dict[str, object]:
    """
    Translate an incoming HTTP request into an API Gateway proxy event.

    Args:
        request: Incoming request.

    Returns:
        dict: REST API (payload v1) proxy event. The body is forwarded as
        base64 so bytes reach the handler exactly as received, the way API
        Gateway delivers binary payloads.
    """
    raw_body = await request.body()
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "queryStringParameters": dict(request.query_params) or None,
        "body": base64.b64encode(raw_body).decode("ascii") if raw_body else None,
        "isBase64Encoded": bool(raw_body),
        "requestContext": {
            "httpMethod": request.method,
            "path": request.url.path,
            "stage": settings.api_stage,
            "requestId": str(uuid4()),
        },
    }


@app.api_route("/{path:path}", methods=_FORWARDED_METHODS)
async def invoke_handler(request: Request) -> Response:
    """
    Forward any request to the Lambda handler.

    Returns:
        Response: Handler status code, headers and body.
    """
    event = await build_proxy_event(request)
    result = lambda_handler(event, LocalLambdaContext())
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )


def run() -> None:
    """Serve the local host with uvicorn (``fullname-serve``)."""
    uvicorn.run(app, host=settings.host, port=settings.port)
