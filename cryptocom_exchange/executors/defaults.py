"""Default executor configuration.

This module defines the default HTTP executor implementation used by the
SDK when no custom executor is provided.
"""

from typing import Type

from cryptocom_exchange.executors.httpx import HttpxHttpExecutor
from cryptocom_exchange.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
