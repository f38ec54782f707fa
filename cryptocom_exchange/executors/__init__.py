"""HTTP executor implementations.

This package provides pluggable asynchronous HTTP client implementations
for the SDK, backed by httpx, aiohttp, or requests.
"""

from cryptocom_exchange.executors.aiohttp import AiohttpHttpExecutor
from cryptocom_exchange.executors.defaults import DEFAULT_HTTP_EXECUTOR
from cryptocom_exchange.executors.httpx import HttpxHttpExecutor
from cryptocom_exchange.executors.interface import HttpExecutor, HttpResponse
from cryptocom_exchange.executors.requests import RequestsHttpExecutor

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "AiohttpHttpExecutor",
    "RequestsHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
