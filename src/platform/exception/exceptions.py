class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    """Invalid input or a broken domain rule"""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    """Role or ownership mismatch (NotAuthorized)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    """State transition out of a terminal state, or a duplicate"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class InsufficientInventoryError(ConflictError):
    def __init__(self, message: str = 'Insufficient tickets remaining') -> None:
        super().__init__(message)


class SoldOutError(InsufficientInventoryError):
    def __init__(self, message: str = 'Tickets are sold out') -> None:
        super().__init__(message)


class AuthenticationError(CustomBaseError):
    """No (valid) principal on the request (NotAuthenticated)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)
