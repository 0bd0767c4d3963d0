"""
Users router.

Endpoints for registering, reading, updating and soft deleting users.
Fixed paths (/stats, /active, /search, /domain) are declared before
/{user_id} so they are matched first.
"""

import logging
from typing import List

from fastapi import APIRouter, Response

from ..errors import to_http_exception
from ..schemas.user_schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    ChangePasswordRequest,
    ListUsersResponse,
)
from ....application.commands import ChangePasswordCommand, CreateUserCommand
from ....application.dto import UserDTO, UserStatsResult
from ....application.queries import (
    GetUserQuery,
    GetUsersQuery,
    GetUserStatsQuery,
    normalize_pagination,
)
from ....core.dependencies import (
    SettingsDep,
    UserUseCaseDep,
    CreateUserHandlerDep,
    ChangePasswordHandlerDep,
    GetUserHandlerDep,
    GetUsersHandlerDep,
    GetUserStatsHandlerDep,
)
from ....core.errors import CommerceServiceError

logger = logging.getLogger("commerce-service.api.users")

router = APIRouter(tags=["users"])


@router.post("", response_model=UserDTO, status_code=201)
async def create_user(
    request: CreateUserRequest,
    handler: CreateUserHandlerDep
) -> UserDTO:
    """
    Register a new user.

    Raises:
        HTTPException 400: If a field is missing or the password is too short
        HTTPException 409: If the email is already registered
    """
    try:
        command = CreateUserCommand(
            email=request.email,
            name=request.name,
            password=request.password
        )
        return await handler.handle(command)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=ListUsersResponse)
async def list_users(
    handler: GetUsersHandlerDep,
    app_settings: SettingsDep,
    limit: int = 0,
    offset: int = 0
) -> ListUsersResponse:
    """
    List live users, ordered by id.

    limit <= 0 selects the default page size, values above the maximum
    are capped.
    """
    try:
        users = await handler.handle(GetUsersQuery(limit=limit, offset=offset))
    except CommerceServiceError as e:
        raise to_http_exception(e) from e

    limit, offset = normalize_pagination(
        limit, offset, app_settings.default_page_size, app_settings.max_page_size
    )
    return ListUsersResponse(users=users, limit=limit, offset=offset, count=len(users))


@router.get("/stats", response_model=UserStatsResult)
async def get_user_stats(handler: GetUserStatsHandlerDep) -> UserStatsResult:
    try:
        return await handler.handle(GetUserStatsQuery())
    except CommerceServiceError as e:
        raise to_http_exception(e) from e


@router.get("/active", response_model=List[UserDTO])
async def get_active_users(use_case: UserUseCaseDep) -> List[UserDTO]:
    try:
        users = await use_case.get_active_users()
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return [UserDTO.from_entity(user) for user in users]


@router.get("/search", response_model=ListUsersResponse)
async def search_users(
    use_case: UserUseCaseDep,
    app_settings: SettingsDep,
    email: str = "",
    name: str = "",
    limit: int = 0,
    offset: int = 0
) -> ListUsersResponse:
    """Search live users by email and/or name substring."""
    limit, offset = normalize_pagination(
        limit, offset, app_settings.default_page_size, app_settings.max_page_size
    )
    try:
        users = await use_case.search_users(limit=limit, offset=offset, email=email, name=name)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e

    return ListUsersResponse(
        users=[UserDTO.from_entity(user) for user in users],
        limit=limit,
        offset=offset,
        count=len(users)
    )


@router.get("/domain/{domain}", response_model=List[UserDTO])
async def get_users_by_domain(domain: str, use_case: UserUseCaseDep) -> List[UserDTO]:
    try:
        users = await use_case.get_users_by_email_domain(domain)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return [UserDTO.from_entity(user) for user in users]


@router.get("/{user_id}", response_model=UserDTO)
async def get_user(user_id: int, handler: GetUserHandlerDep) -> UserDTO:
    """
    Raises:
        HTTPException 400: If user_id is not positive
        HTTPException 404: If the user does not exist or is deleted
    """
    try:
        return await handler.handle(GetUserQuery(user_id=user_id))
    except CommerceServiceError as e:
        raise to_http_exception(e) from e


@router.put("/{user_id}", response_model=UserDTO)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    use_case: UserUseCaseDep
) -> UserDTO:
    try:
        user = await use_case.update_user(
            user_id,
            email=request.email or "",
            name=request.name
        )
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return UserDTO.from_entity(user)


@router.put("/{user_id}/password", response_model=UserDTO)
async def change_password(
    user_id: int,
    request: ChangePasswordRequest,
    handler: ChangePasswordHandlerDep
) -> UserDTO:
    """
    Raises:
        HTTPException 400: If the password is shorter than the policy allows
        HTTPException 404: If the user does not exist or is deleted
    """
    try:
        return await handler.handle(
            ChangePasswordCommand(user_id=user_id, password=request.password)
        )
    except CommerceServiceError as e:
        raise to_http_exception(e) from e


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, use_case: UserUseCaseDep) -> Response:
    try:
        await use_case.delete_user(user_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)


@router.post("/{user_id}/restore", response_model=UserDTO)
async def restore_user(user_id: int, use_case: UserUseCaseDep) -> UserDTO:
    try:
        user = await use_case.restore_user(user_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    logger.info(f"User {user_id} restored via API")
    return UserDTO.from_entity(user)
