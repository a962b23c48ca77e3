"""Auth flows: state transitions around remote calls.

Each flow dispatches a REQUEST action (where it affects session status),
awaits the API, persists the session token on success, dispatches exactly one
terminal action and finally navigates. Flows are not sequenced against each
other: when two run concurrently, terminal actions apply in completion order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from authstate.clients.graphql_client import GraphQLClient, GraphQLResult
from authstate.clients.http_client import HttpClient
from authstate.core.errors import ApiError, AuthError, ProtocolError, ValidationError
from authstate.core.result import Result
from authstate.flows import queries
from authstate.schemas.auth import (
    AuthPayload,
    LoginRequest,
    PasswordResetEmailRequest,
    ResetPasswordRequest,
    SignupRequest,
    User,
)
from authstate.schemas.state import Action
from authstate.security.tokens import redact_token, validate_secret_token
from authstate.state import actions
from authstate.storage.token_store import TokenStore
from authstate.utils.navigation import (
    RESET_EMAIL_SENT_PATH,
    RESET_PASSWORD_SUCCESS_PATH,
    ROOT_PATH,
    Navigator,
)

logger = logging.getLogger(__name__)

Dispatch = Callable[[Action], Any]
Variables = Mapping[str, Any] | BaseModel

OAUTH_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"


def _validation_error(exc: PydanticValidationError) -> ValidationError:
    fields = {
        ".".join(str(part) for part in err["loc"]) or "_input": err["msg"]
        for err in exc.errors()
    }
    return ValidationError("Invalid input", fields=fields)


def _parse_variables(model: type[BaseModel], variables: Variables) -> BaseModel:
    if isinstance(variables, BaseModel):
        variables = variables.model_dump(by_alias=True)
    return model.model_validate(dict(variables))


def _coerce_error(error: Any) -> dict[str, Any] | None:
    """Normalise a server-sent error value into the mapping kept in state."""
    if error is None:
        return None
    if isinstance(error, Mapping):
        return dict(error)
    return {"_error": str(error)}


def _session_from(result: GraphQLResult) -> Result[AuthPayload, AuthError]:
    """Extract ``payload {user, authToken}`` from a GraphQL result."""
    if result.error is not None:
        return Result.failure(result.error)
    raw = (result.data or {}).get("payload")
    if not isinstance(raw, Mapping):
        return Result.failure(ProtocolError("Response has no payload"))
    try:
        payload = AuthPayload.model_validate(dict(raw))
    except PydanticValidationError as exc:
        return Result.failure(ProtocolError(f"Malformed session payload: {exc.error_count()} error(s)"))
    if not payload.auth_token:
        return Result.failure(ProtocolError("Response has no authToken"))
    return Result.success(payload)


class AuthFlows:
    """Orchestrates login, signup, reset, verification, OAuth and logout."""

    def __init__(
            self,
            graphql: GraphQLClient,
            http: HttpClient,
            token_store: TokenStore,
            navigator: Navigator,
            *,
            verify_email_path: str = "/auth/verify-email",
    ) -> None:
        self.graphql = graphql
        self.http = http
        self.token_store = token_store
        self.navigator = navigator
        self.verify_email_path = verify_email_path

    # ------------------------- credential flows ------------------------- #
    async def _credential_flow(
            self,
            name: str,
            query: str,
            model: type[BaseModel],
            variables: Variables,
            dispatch: Dispatch,
            redirect: str,
            *,
            on_request: Callable[[], Action],
            on_success: Callable[[AuthPayload], Action],
            on_error: Callable[[AuthError], Action],
    ) -> Result[AuthPayload, AuthError]:
        dispatch(on_request())
        try:
            credentials = _parse_variables(model, variables)
        except PydanticValidationError as exc:
            error = _validation_error(exc)
            dispatch(on_error(error))
            return Result.failure(error)

        logger.info("%s started", name)
        outcome = _session_from(await self.graphql.execute(query, credentials.model_dump()))
        if not outcome.ok:
            logger.warning("%s failed: %s", name, outcome.error.message)
            dispatch(on_error(outcome.error))
            return outcome

        payload = outcome.value
        self.token_store.set(payload.auth_token)
        dispatch(on_success(payload))
        logger.info("%s succeeded, token %s", name, redact_token(payload.auth_token))
        self.navigator.replace(redirect)
        return outcome

    async def login_user(
            self, variables: Variables, dispatch: Dispatch, redirect: str
    ) -> Result[AuthPayload, AuthError]:
        """Log in with email and password.

        Returns a failure result (after dispatching LOGIN_USER_ERROR) so that
        forms can show the error inline.
        """
        return await self._credential_flow(
            "login",
            queries.LOGIN_QUERY,
            LoginRequest,
            variables,
            dispatch,
            redirect,
            on_request=actions.login_user_request,
            on_success=actions.login_user_success,
            on_error=actions.login_user_error,
        )

    async def signup_user(
            self, variables: Variables, dispatch: Dispatch, redirect: str
    ) -> Result[AuthPayload, AuthError]:
        """Create an account and log it in."""
        return await self._credential_flow(
            "signup",
            queries.CREATE_USER_MUTATION,
            SignupRequest,
            variables,
            dispatch,
            redirect,
            on_request=actions.signup_user_request,
            on_success=actions.signup_user_success,
            on_error=actions.signup_user_error,
        )

    async def login_token(self, dispatch: Dispatch) -> None:
        """Re-authenticate with the stored session token, e.g. at startup.

        The token store is the source of truth here; the flow neither writes
        it nor navigates.
        """
        dispatch(actions.login_user_request())
        token = self.token_store.get()
        if not token:
            dispatch(actions.login_user_error(ValidationError("No stored session token")))
            return

        result = await self.graphql.execute(queries.LOGIN_TOKEN_QUERY)
        if result.error is not None:
            logger.warning("Token login failed for %s: %s", redact_token(token), result.error.message)
            dispatch(actions.login_user_error(result.error))
            return

        raw = (result.data or {}).get("payload")
        try:
            user = User.model_validate(dict(raw)) if isinstance(raw, Mapping) else None
        except PydanticValidationError:
            user = None
        if user is None:
            dispatch(actions.login_user_error(ProtocolError("Response has no user")))
            return
        dispatch(actions.login_user_success(AuthPayload(auth_token=token, user=user)))

    # ------------------------- password reset --------------------------- #
    async def email_password_reset(self, variables: Variables) -> Result[None, AuthError]:
        """Ask the API to email a reset link. Does not touch auth state."""
        try:
            request = _parse_variables(PasswordResetEmailRequest, variables)
        except PydanticValidationError as exc:
            return Result.failure(_validation_error(exc))

        result = await self.graphql.execute(
            queries.EMAIL_PASSWORD_RESET_MUTATION, request.model_dump()
        )
        if result.error is not None:
            return Result.failure(result.error)
        self.navigator.push(RESET_EMAIL_SENT_PATH)
        return Result.success(None)

    async def reset_password(
            self, variables: Variables, dispatch: Dispatch
    ) -> Result[AuthPayload, AuthError]:
        """Set a new password with an emailed reset token, then log in.

        The reset token is checked locally first; a malformed or expired token
        fails without any request or dispatch.
        """
        try:
            request = _parse_variables(ResetPasswordRequest, variables)
        except PydanticValidationError as exc:
            return Result.failure(_validation_error(exc))
        try:
            validate_secret_token(request.reset_token)
        except ValidationError as exc:
            return Result.failure(exc)

        outcome = _session_from(
            await self.graphql.execute(
                queries.RESET_PASSWORD_MUTATION,
                {"password": request.password},
                auth_override=request.reset_token,
            )
        )
        if not outcome.ok:
            logger.warning("Password reset failed: %s", outcome.error.message)
            return outcome

        payload = outcome.value
        self.token_store.set(payload.auth_token)
        dispatch(actions.signup_user_success(payload))
        self.navigator.replace(RESET_PASSWORD_SUCCESS_PATH)
        return outcome

    # ------------------------- email / oauth ---------------------------- #
    async def verify_email(self, verified_email_token: str, dispatch: Dispatch) -> Action:
        """Confirm the account email; only the local ``isVerified`` flag changes."""
        result = await self.http.post_json(
            self.verify_email_path, {"verifiedEmailToken": verified_email_token}
        )
        if not result.ok:
            return dispatch(actions.verify_email_error(result.error))

        response = result.value
        if response.status_code == 200:
            return dispatch(actions.verify_email_success())

        try:
            body = response.json()
        except ProtocolError as exc:
            return dispatch(actions.verify_email_error(exc))
        error = _coerce_error(body.get("error") if isinstance(body, Mapping) else None)
        if error is None:
            error = ApiError(
                f"Email verification failed (HTTP {response.status_code})",
                status_code=response.status_code,
            ).to_payload()
        return dispatch(actions.verify_email_error(error))

    async def oauth_login(self, provider_path: str, dispatch: Dispatch, redirect: str) -> None:
        """Complete an OAuth login by calling the provider callback endpoint."""
        dispatch(actions.login_user_request())
        result = await self.http.fetch(
            provider_path,
            headers={"Accept": OAUTH_ACCEPT},
            credentials="include",
        )
        if not result.ok:
            dispatch(actions.login_user_error(result.error))
            return

        try:
            parsed = result.value.json()
        except ProtocolError as exc:
            dispatch(actions.login_user_error(exc))
            return
        if not isinstance(parsed, Mapping):
            dispatch(actions.login_user_error(ProtocolError("OAuth response is not an object")))
            return

        body = dict(parsed)
        error = body.pop("error", None)
        if body.get("authToken"):
            try:
                payload = AuthPayload.model_validate(body)
            except PydanticValidationError as exc:
                dispatch(actions.login_user_error(
                    ProtocolError(f"Malformed OAuth payload: {exc.error_count()} error(s)")
                ))
                return
            self.token_store.set(payload.auth_token)
            dispatch(actions.login_user_success(payload))
            logger.info("OAuth login via %s succeeded", provider_path)
            self.navigator.replace(redirect)
            return

        logger.warning("OAuth login via %s returned no token", provider_path)
        dispatch(actions.login_user_error(
            _coerce_error(error) or ProtocolError("OAuth response has no authToken")
        ))

    # ------------------------- logout ----------------------------------- #
    def logout_and_redirect(self) -> Callable[[Dispatch], None]:
        """Forget the session token now; the returned thunk resets state."""
        self.token_store.remove()

        def _logout(dispatch: Dispatch) -> None:
            dispatch(actions.logout_user())
            self.navigator.replace(ROOT_PATH)

        return _logout
