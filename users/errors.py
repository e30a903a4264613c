from app.core.errors import ServiceError


class UserNotFoundError(ServiceError):
    code = "USER_NOT_FOUND"
    http_status = 404
