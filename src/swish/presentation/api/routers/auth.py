"""Authentication router for registration, login and the caller's profile."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, File, Form, UploadFile, status

from swish.presentation.api.dependencies import (
    AuthService,
    CurrentUserContext,
    DBSession,
    SettingsDep,
)
from swish.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    UpdateProfileRequest,
    UserResponse,
)
from swish.presentation.api.schemas.common import ErrorResponse
from swish_identity import PhotoUpload, RegistrationCandidate, UpdateProfileCommand
from swish_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ShortFormField = Annotated[Optional[str], Form(max_length=50)]
TextFormField = Annotated[Optional[str], Form(max_length=100)]


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input or email taken"},
        502: {"model": ErrorResponse, "description": "Photo could not be stored"},
    },
)
async def register(  # NOQA: PLR0913
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
    name: Annotated[str, Form(max_length=100)],
    email: Annotated[str, Form(max_length=255)],
    password: Annotated[str, Form(max_length=1024)],
    role: Annotated[Optional[str], Form(max_length=20)] = None,
    contact: TextFormField = None,
    student_id: ShortFormField = None,
    department: TextFormField = None,
    year: Annotated[Optional[str], Form(max_length=20)] = None,
    employee_id: ShortFormField = None,
    faculty_department: TextFormField = None,
    designation: TextFormField = None,
    admin_code: Annotated[Optional[str], Form(max_length=255)] = None,
    profile_photo: Annotated[Optional[UploadFile], File()] = None,
) -> AuthResponse:
    """
    Create an account (multipart form, optional ``profile_photo`` file).

    Roles: student (default), faculty, admin. Admin accounts need the
    campus admin access code.
    """
    photo = None
    if profile_photo is not None and profile_photo.filename:
        photo = PhotoUpload(
            # One byte past the limit is enough for the size check to reject it
            content=await profile_photo.read(settings.photo_max_bytes + 1),
            content_type=profile_photo.content_type,
            filename=profile_photo.filename,
        )

    candidate = RegistrationCandidate(
        name=name,
        email=email,
        password=password,
        role=role or "student",
        contact=contact or "",
        role_fields={
            "student_id": student_id,
            "department": department,
            "year": year,
            "employee_id": employee_id,
            "faculty_department": faculty_department,
            "designation": designation,
        },
        admin_code=admin_code,
        photo=photo,
    )

    try:
        user, token = await auth_service.register(candidate, commit=session.commit)
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """Authenticate with email and password and receive a session token."""
    try:
        user, token = await auth_service.authenticate(request.email, request.password)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def get_me(
    user_context: CurrentUserContext,
    auth_service: AuthService,
) -> UserResponse:
    user = await auth_service.get_user(user_context.user_id)
    return UserResponse.from_user(user)


@router.put(
    "/profile",
    summary="Update current user's profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user_context: CurrentUserContext,
    session: DBSession,
) -> ProfileResponse:
    """
    Apply a partial profile update.

    Only the fields sent are changed. Email and role cannot be changed.
    """
    command = UpdateProfileCommand(UserRepositorySQLAlchemy(session))

    try:
        user = await command.execute(
            user_id=user_context.user_id,
            name=request.name,
            contact=request.contact,
            bio=request.bio,
            skills=request.skills,
            role_fields=request.role_fields(),
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Profile updated for user: %s", user.id)
    return ProfileResponse(
        message="Profile updated successfully",
        user=UserResponse.from_user(user),
    )
