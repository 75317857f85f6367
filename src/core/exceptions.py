"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the domain core."""

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    NOT_A_PARTICIPANT = "NOT_A_PARTICIPANT"
    NOT_ACCOUNT_OWNER = "NOT_ACCOUNT_OWNER"
    ACCOUNT_BANNED = "ACCOUNT_BANNED"

    # State errors (409)
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    LABEL_ALREADY_SET = "LABEL_ALREADY_SET"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: ErrorCode = ErrorCode.FORBIDDEN,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=403,
            details=details,
        )


class NotAParticipantError(AuthorizationError):
    """Profile is not allowed to act on the conversation."""

    def __init__(self, conversation_id: str, profile_id: str, action: str) -> None:
        super().__init__(
            message=f"Profile {profile_id} may not {action} in conversation {conversation_id}",
            error_code=ErrorCode.NOT_A_PARTICIPANT,
            details={
                "conversation_id": conversation_id,
                "profile_id": profile_id,
                "action": action,
            },
        )


class NotAccountOwnerError(AuthorizationError):
    """Only the account owner may view the account's profiles."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message="Only the account owner may view its profiles",
            error_code=ErrorCode.NOT_ACCOUNT_OWNER,
            details={"account_id": account_id},
        )


class AccountBannedError(AuthorizationError):
    """Banned accounts may not act."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message=f"Account is banned: {account_id}",
            error_code=ErrorCode.ACCOUNT_BANNED,
            details={"account_id": account_id},
        )


class InvalidStateTransitionError(AppException):
    """An entity rejected a change to its state."""

    def __init__(
        self,
        message: str = "Invalid state transition",
        error_code: ErrorCode = ErrorCode.INVALID_STATE_TRANSITION,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=409,
            details=details,
        )


class LabelAlreadySetError(InvalidStateTransitionError):
    """A reply's label can be assigned at most once."""

    def __init__(self, reply_id: str, current: str, attempted: str | None) -> None:
        super().__init__(
            message=f"Reply {reply_id} is already labeled {current}",
            error_code=ErrorCode.LABEL_ALREADY_SET,
            details={
                "reply_id": reply_id,
                "current_label": current,
                "attempted_label": attempted,
            },
        )
