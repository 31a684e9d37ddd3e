"""Exceptions raised by the OpenTok server helper."""


class OpenTokError(Exception):
    """Base class for every error this library raises."""


class EncodingError(OpenTokError):
    """Claims, request body or key material could not be encoded."""

    def __init__(self, message: str = "Cannot encode request") -> None:
        super().__init__(message)


class BadRequestError(OpenTokError):
    """The OpenTok API answered with a 4xx status."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(f"Bad request {detail}")
        self.detail = detail
        self.status_code = status_code


class ServerError(OpenTokError):
    """The OpenTok API answered with a 5xx status."""

    def __init__(self, detail: str, status_code: int = 500) -> None:
        super().__init__(f"OpenTok server error {detail}")
        self.detail = detail
        self.status_code = status_code


class UnexpectedResponseError(OpenTokError):
    """A 2xx response whose body does not have the expected shape."""

    def __init__(self, body: str) -> None:
        super().__init__(f"Unexpected response {body}")
        self.body = body


class RequestError(OpenTokError):
    """The request never produced a response (connection, timeout, TLS)."""


class UnknownError(OpenTokError):
    def __init__(self, status_code: int | None = None) -> None:
        super().__init__("Unknown error")
        self.status_code = status_code
