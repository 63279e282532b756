"""Platform API errors."""


class ApiError(Exception):
    """The platform API answered with an error."""

    def __init__(self, status_code: int, message: str = "Request failed"):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")

    @property
    def unauthorized(self) -> bool:
        return self.status_code == 401
