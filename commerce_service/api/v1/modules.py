"""
Registry of API modules.

Each module contributes one router mounted under ``/api/v1/<name>``.
Modules are registered in the order they appear in API_MODULES.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from fastapi import APIRouter, FastAPI

from .routers import orders_router, users_router

logger = logging.getLogger("commerce-service.api.modules")

API_PREFIX = "/api/v1"


@dataclass(frozen=True)
class ApiModule:
    """A named group of routes."""

    name: str
    router: APIRouter

    @property
    def prefix(self) -> str:
        return f"{API_PREFIX}/{self.name}"


API_MODULES = (
    ApiModule("users", users_router),
    ApiModule("orders", orders_router),
)


def register_modules(app: FastAPI, modules: Iterable[ApiModule] = API_MODULES) -> None:
    """Mount every module's router on the application."""
    for module in modules:
        app.include_router(module.router, prefix=module.prefix)
        logger.info(f"Module registered: {module.name} at {module.prefix}")
