"""Authentication API routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Annotated

from litestar import Controller, Response, get, post
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED

from photofeed.api.routes.errors import error_response
from photofeed.api.schemas.auth import (
    ErrorResponse,
    IdentityResponse,
    MessageResponse,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
    WhoAmIResponse,
)
from photofeed.api.security import (
    CookieConfig,
    Identity,
    auth_guard,
    clear_session_cookie,
    session_cookie,
)
from photofeed.api.services import AuthService
from photofeed.core.exceptions import DuplicateCredentialError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthController(Controller):
    """Authentication endpoints."""

    path = "/auth"
    tags: Sequence[str] | None = ["Authentication"]

    @post("/signup", status_code=HTTP_201_CREATED)
    async def sign_up(
        self,
        data: Annotated[SignUpRequest, Body()],
        auth_service: AuthService,
    ) -> Response[SignUpResponse | ErrorResponse]:
        """Register a new user account.

        Returns the public fields of the created user.
        """
        try:
            user = await auth_service.sign_up(
                email=data.email,
                password=data.password,
                username=data.username,
                display_name=data.display_name,
                bio=data.bio,
                avatar_url=data.avatar_url,
            )
            return Response(content=user, status_code=HTTP_201_CREATED)

        except DuplicateCredentialError as e:
            return error_response(e)

    @post("/signin", status_code=HTTP_200_OK)
    async def sign_in(
        self,
        data: Annotated[SignInRequest, Body()],
        auth_service: AuthService,
        cookie_config: CookieConfig,
    ) -> Response[SignInResponse | ErrorResponse]:
        """Authenticate user and set the session cookie."""
        try:
            result = await auth_service.sign_in(email=data.email, password=data.password)

        except InvalidCredentialsError as e:
            return error_response(e)

        return Response(
            content=SignInResponse(
                identity=IdentityResponse(
                    id=result.identity.subject,
                    email=result.identity.email,
                ),
                message="Signed in successfully",
            ),
            status_code=HTTP_200_OK,
            cookies=[session_cookie(cookie_config, result.access_token)],
        )

    @post("/signout", status_code=HTTP_200_OK)
    async def sign_out(self, cookie_config: CookieConfig) -> Response[MessageResponse]:
        """Clear the session cookie.

        The token itself remains valid until it expires.
        """
        return Response(
            content=MessageResponse(message="Signed out successfully"),
            status_code=HTTP_200_OK,
            cookies=[clear_session_cookie(cookie_config)],
        )

    @get("/me", guards=[auth_guard])
    async def who_am_i(self, identity: Identity) -> WhoAmIResponse:
        """Get the identity of the current session."""
        return WhoAmIResponse(
            logged_in=True,
            identity=IdentityResponse(id=identity.subject, email=identity.email),
        )
