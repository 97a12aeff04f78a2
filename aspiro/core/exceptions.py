"""
Error taxonomy.

Every error a client can see is an APIException subclass; the handlers in
main.py render them all as {"error": code, "message": ..., "details": ...}.
Subclasses only override the class attributes.
"""
from typing import Any, Dict, Optional


class APIException(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None):
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


# 400
class BadRequestException(APIException):
    status_code = 400
    code = "BAD_REQUEST"
    message = "Bad request"


class InvalidInputException(BadRequestException):
    """A required field is missing, blank or malformed."""

    code = "INVALID_INPUT"
    message = "Invalid input"


# 401
class UnauthorizedException(APIException):
    status_code = 401
    code = "UNAUTHORIZED"
    message = "Unauthorized"


class InvalidCredentialsException(UnauthorizedException):
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class InvalidTokenException(UnauthorizedException):
    code = "INVALID_TOKEN"
    message = "Invalid or expired token"


# 404
class NotFoundException(APIException):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class CareerNotFoundException(NotFoundException):
    code = "CAREER_NOT_FOUND"
    message = "Career not found"


class SkillNotFoundException(NotFoundException):
    code = "SKILL_NOT_FOUND"
    message = "Skill not found"


class RecommendationNotFoundException(NotFoundException):
    code = "RECOMMENDATION_NOT_FOUND"
    message = "No recommendation found for this career"


# 409
class ConflictException(APIException):
    status_code = 409
    code = "CONFLICT"
    message = "Resource conflict"


class EmailAlreadyExistsException(ConflictException):
    code = "EMAIL_EXISTS"
    message = "Email already registered"


# 500
class InternalServerException(APIException):
    pass


class UpstreamFailureException(InternalServerException):
    """The backing store failed. The cause is logged, never returned."""

    code = "UPSTREAM_FAILURE"
