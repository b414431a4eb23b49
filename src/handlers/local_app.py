"""
FastAPI application that serves the Lambda handlers for local development.

Each request is translated into an API Gateway proxy event, dispatched to the
matching handler, and the handler's response dict is returned as-is.
"""

import base64
from typing import Any

from fastapi import FastAPI, Request, Response

from core.clients import get_trip_store
from core.http import Handler
from handlers import (
    confirm_participant,
    confirm_trip,
    create_activity,
    create_invite,
    create_link,
    create_trip,
    get_activities,
    get_links,
    get_participant,
    get_participants,
    get_trip_details,
    update_trip,
)

ROUTES: list[tuple[str, str, Handler]] = [
    ("POST", "/trips", create_trip.handler),
    ("GET", "/trips/{tripId}/confirm", confirm_trip.handler),
    ("PUT", "/trips/{tripId}", update_trip.handler),
    ("GET", "/trips/{tripId}", get_trip_details.handler),
    ("POST", "/trips/{tripId}/invites", create_invite.handler),
    ("GET", "/trips/{tripId}/participants", get_participants.handler),
    ("GET", "/participants/{participantId}/confirm", confirm_participant.handler),
    ("GET", "/participants/{participantId}", get_participant.handler),
    ("POST", "/trips/{tripId}/activities", create_activity.handler),
    ("GET", "/trips/{tripId}/activities", get_activities.handler),
    ("POST", "/trips/{tripId}/links", create_link.handler),
    ("GET", "/trips/{tripId}/links", get_links.handler),
]


async def to_proxy_event(request: Request) -> dict[str, Any]:
    raw = await request.body()
    body, encoded = None, False
    if raw:
        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError:
            body, encoded = base64.b64encode(raw).decode("ascii"), True

    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "pathParameters": dict(request.path_params) or None,
        "queryStringParameters": dict(request.query_params) or None,
        "headers": dict(request.headers),
        "body": body,
        "isBase64Encoded": encoded,
    }


def _endpoint(handler: Handler):
    # async so handlers run one at a time on the event loop, as in a Lambda
    # container; the store's single-connection pool is never contended
    async def endpoint(request: Request) -> Response:
        result = handler(await to_proxy_event(request), None)
        return Response(
            content=result.get("body", ""),
            status_code=result["statusCode"],
            headers=result.get("headers") or {},
        )

    return endpoint


def create_app() -> FastAPI:
    app = FastAPI(title="plann.er API (local)", description="Lambda handlers served over HTTP")

    for method, path, handler in ROUTES:
        name = handler.__module__.rsplit(".", 1)[-1]
        app.add_api_route(path, _endpoint(handler), methods=[method], name=name)

    @app.get("/health")
    async def health_check():
        healthy = get_trip_store().health_check()
        return Response(
            content='{"status": "healthy"}' if healthy else '{"status": "unavailable"}',
            status_code=200 if healthy else 503,
            media_type="application/json",
        )

    return app
