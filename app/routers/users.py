# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Handles creating, listing, reading, updating and deleting users.
#
# Most routes are plain (sync) functions so FastAPI runs them in its
# threadpool; the UserStore is locked internally. update_user is async
# because it reads the raw body itself (see its docstring).
#
# Create and update also mirror the user to a JSON file. The write runs as
# a background task after the response is sent, and its failures are only
# logged.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Path, Request, status
from pydantic import ValidationError

from app.dependencies import UserMirrorDep, UserStoreDep
from app.exceptions import InvalidRequestBodyError, UserNotFoundError
from core.models import APIResponse, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

UserIdPath = Annotated[str, Path(description="User ID")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=APIResponse, response_model_exclude_none=True)
def list_users(store: UserStoreDep):
    """
    List all users.

    Order is not guaranteed.
    """
    return APIResponse.success(
        "Users retrieved successfully",
        data=store.list_all(),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=APIResponse,
    response_model_exclude_none=True,
)
def create_user(
    request: UserCreate,
    store: UserStoreDep,
    mirror: UserMirrorDep,
    background_tasks: BackgroundTasks,
):
    """
    Create a new user.

    The ID and created_at are generated by the server; values sent by
    the client are ignored.
    """
    user = store.create(name=request.name, email=request.email)
    logger.info(f"Created user: {user.id}")

    background_tasks.add_task(mirror.write_latest, user.id, store.get)

    return APIResponse.success("User created successfully", data=user)


@router.get("/{user_id}", response_model=APIResponse, response_model_exclude_none=True)
def get_user(user_id: UserIdPath, store: UserStoreDep):
    """Get a single user by ID."""
    user = store.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    return APIResponse.success("User retrieved successfully", data=user)


@router.put(
    "/{user_id}",
    response_model=APIResponse,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UserUpdate.model_json_schema()}},
        }
    },
)
async def update_user(
    user_id: UserIdPath,
    http_request: Request,
    store: UserStoreDep,
    mirror: UserMirrorDep,
    background_tasks: BackgroundTasks,
):
    """
    Update a user's name and/or email.

    Missing, null or empty fields are left unchanged.

    The user is looked up before the body is parsed, so an unknown ID is
    a 404 even when the body is invalid.
    """
    if store.get(user_id) is None:
        raise UserNotFoundError(user_id)

    try:
        request = UserUpdate.model_validate_json(await http_request.body())
    except ValidationError as e:
        logger.debug(f"Invalid update body for user {user_id}: {e.errors()}")
        raise InvalidRequestBodyError() from e

    user = store.update(user_id, name=request.name, email=request.email)
    if user is None:
        raise UserNotFoundError(user_id)

    logger.info(f"Updated user: {user_id}")

    background_tasks.add_task(mirror.write_latest, user_id, store.get)

    return APIResponse.success("User updated successfully", data=user)


@router.delete("/{user_id}", response_model=APIResponse, response_model_exclude_none=True)
def delete_user(user_id: UserIdPath, store: UserStoreDep):
    """
    Delete a user.

    The mirror file, if any, is left on disk.
    """
    if not store.delete(user_id):
        raise UserNotFoundError(user_id)

    logger.info(f"Deleted user: {user_id}")

    return APIResponse.success("User deleted successfully")
