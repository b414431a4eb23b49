"""API Gateway proxy helpers: request parsing, JSON responses and error mapping."""

import base64
import functools
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from core.errors import ErrorCode, PlannerError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_JSON_HEADERS = {"Content-Type": "application/json"}


def json_response(status_code: int, payload: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(_JSON_HEADERS),
        "body": json.dumps(payload, default=str),
    }


def redirect_response(location: str) -> dict[str, Any]:
    return {"statusCode": 302, "headers": {"Location": location}, "body": ""}


def error_response(error: PlannerError) -> dict[str, Any]:
    return json_response(
        error.status_code,
        {"error": {"code": error.code.value, "message": error.user_message}},
    )


def _describe(exc: pydantic.ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())


def parse_path(event: dict[str, Any], model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate(event.get("pathParameters") or {})
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid path parameters: {_describe(e)}") from e


def parse_body(event: dict[str, Any], model: type[ModelT]) -> ModelT:
    raw = event.get("body")
    if event.get("isBase64Encoded") and raw:
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except ValueError as e:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            raise ValidationError(f"Request body is not valid base64 UTF-8: {e}", code=ErrorCode.INVALID_REQUEST) from e
    try:
        data = json.loads(raw) if raw else {}
    except json.JSONDecodeError as e:
        raise ValidationError(f"Request body is not valid JSON: {e}", code=ErrorCode.INVALID_REQUEST) from e
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid request body: {_describe(e)}") from e


Handler = Callable[[dict[str, Any], object], dict[str, Any]]


def api_handler(func: Handler) -> Handler:
    """Map exceptions raised by a Lambda handler to JSON error responses."""

    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
        try:
            return func(event, context)
        except PlannerError as e:
            if e.status_code >= 500:
                logger.error("%s failed with %s: %s", func.__module__, e.code.value, e.message)
            else:
                logger.info("%s rejected request with %s: %s", func.__module__, e.code.value, e.message)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", func.__module__)
            return error_response(PlannerError("Unhandled error", code=ErrorCode.INTERNAL_ERROR))

    return wrapper
