import asyncio
from enum import Enum
from typing import Optional

import aiohttp


class ErrorType(Enum):
    """Classification of fetch failures"""
    NETWORK_TIMEOUT = "network_timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_CLIENT_ERROR = "http_client_error"  # 4xx
    HTTP_SERVER_ERROR = "http_server_error"  # 5xx
    INVALID_URL = "invalid_url"
    UNKNOWN_ERROR = "unknown_error"


# Errors the fetch boundary turns into a failed result. Anything else propagates.
FETCH_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


def classify_status(status_code: int) -> ErrorType:
    """Classify a non-success HTTP status"""
    if 400 <= status_code < 500:
        return ErrorType.HTTP_CLIENT_ERROR
    if 500 <= status_code < 600:
        return ErrorType.HTTP_SERVER_ERROR
    return ErrorType.UNKNOWN_ERROR


def classify_error(error: BaseException, status_code: Optional[int] = None) -> ErrorType:
    """Classify an error into appropriate error type"""
    if isinstance(error, asyncio.TimeoutError):
        return ErrorType.NETWORK_TIMEOUT
    elif isinstance(error, aiohttp.InvalidURL):
        return ErrorType.INVALID_URL
    elif isinstance(error, aiohttp.ClientConnectionError):
        return ErrorType.CONNECTION_ERROR

    if status_code is None:
        status_code = getattr(error, 'status', None)
    if status_code:
        return classify_status(status_code)

    return ErrorType.UNKNOWN_ERROR


def describe_error(error: BaseException) -> str:
    """Readable message for an error whose str() may be empty (timeouts)"""
    message = str(error)
    return message if message else error.__class__.__name__
