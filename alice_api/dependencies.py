# alice_api/dependencies.py
"""
FastAPI dependency providers for application-scoped objects.

The settings, store registry and token manager are built once by
``create_app`` and kept on ``app.state``; handlers reach them through these
providers instead of module-level singletons.
"""
from fastapi import Request

from .auth.token_manager import SessionTokenManagerProtocol
from .settings import Settings
from .storage.registry import StoreRegistry


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store_registry(request: Request) -> StoreRegistry:
    return request.app.state.stores


def get_token_manager(request: Request) -> SessionTokenManagerProtocol:
    return request.app.state.token_manager
