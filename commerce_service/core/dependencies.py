"""FastAPI dependencies"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..application.commands import ChangePasswordHandler, CreateUserHandler
from ..application.queries import GetUserHandler, GetUsersHandler, GetUserStatsHandler
from ..application.use_cases import OrderUseCase, UserUseCase
from ..infrastructure.persistence.database import get_db
from ..infrastructure.persistence.repositories import OrderRepositoryImpl, UserRepositoryImpl
from .config import Settings, settings

# Database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_settings() -> Settings:
    """Get application settings"""
    return settings


# Repositories
def get_user_repository(db: DBSession) -> UserRepositoryImpl:
    return UserRepositoryImpl(db)


def get_order_repository(db: DBSession) -> OrderRepositoryImpl:
    return OrderRepositoryImpl(db)


# Use cases
def get_user_use_case(
    user_repository: UserRepositoryImpl = Depends(get_user_repository)
) -> UserUseCase:
    return UserUseCase(user_repository)


def get_order_use_case(
    order_repository: OrderRepositoryImpl = Depends(get_order_repository),
    user_repository: UserRepositoryImpl = Depends(get_user_repository)
) -> OrderUseCase:
    return OrderUseCase(order_repository, user_repository)


# Command and query handlers
def get_create_user_handler(
    user_use_case: UserUseCase = Depends(get_user_use_case),
    app_settings: Settings = Depends(get_settings)
) -> CreateUserHandler:
    return CreateUserHandler(
        user_use_case,
        min_password_length=app_settings.min_password_length
    )


def get_change_password_handler(
    user_use_case: UserUseCase = Depends(get_user_use_case),
    app_settings: Settings = Depends(get_settings)
) -> ChangePasswordHandler:
    return ChangePasswordHandler(
        user_use_case,
        min_password_length=app_settings.min_password_length
    )


def get_get_user_handler(
    user_repository: UserRepositoryImpl = Depends(get_user_repository)
) -> GetUserHandler:
    return GetUserHandler(user_repository)


def get_get_users_handler(
    user_repository: UserRepositoryImpl = Depends(get_user_repository),
    app_settings: Settings = Depends(get_settings)
) -> GetUsersHandler:
    return GetUsersHandler(
        user_repository,
        default_page_size=app_settings.default_page_size,
        max_page_size=app_settings.max_page_size
    )


def get_get_user_stats_handler(
    user_repository: UserRepositoryImpl = Depends(get_user_repository)
) -> GetUserStatsHandler:
    return GetUserStatsHandler(user_repository)


# Type annotations for dependencies
SettingsDep = Annotated[Settings, Depends(get_settings)]
UserUseCaseDep = Annotated[UserUseCase, Depends(get_user_use_case)]
OrderUseCaseDep = Annotated[OrderUseCase, Depends(get_order_use_case)]
CreateUserHandlerDep = Annotated[CreateUserHandler, Depends(get_create_user_handler)]
ChangePasswordHandlerDep = Annotated[ChangePasswordHandler, Depends(get_change_password_handler)]
GetUserHandlerDep = Annotated[GetUserHandler, Depends(get_get_user_handler)]
GetUsersHandlerDep = Annotated[GetUsersHandler, Depends(get_get_users_handler)]
GetUserStatsHandlerDep = Annotated[GetUserStatsHandler, Depends(get_get_user_stats_handler)]
