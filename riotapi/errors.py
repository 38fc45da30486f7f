class RiotAPIException(Exception):
    """Generic exception for the riotapi library."""
    pass


class ConfigurationError(RiotAPIException):
    """The client was constructed with an unusable configuration."""
    pass


class RegistryLookupError(RiotAPIException, KeyError):
    def __init__(self, method_key: str, reason: str = "not found"):
        super().__init__(method_key)
        self.method_key = method_key
        self.reason = reason

    def __str__(self):
        return f"Method key {self.method_key!r} {self.reason}"


class PathParameterError(RiotAPIException, ValueError):
    def __init__(self, method_key: str, missing: list):
        super().__init__(method_key, missing)
        self.method_key = method_key
        self.missing = missing

    def __str__(self):
        return f"Missing path parameters for {self.method_key}: {', '.join(self.missing)}"


class JobExpired(RiotAPIException):
    def __init__(self, job_id: str, waited: float):
        super().__init__(job_id, waited)
        self.job_id = job_id
        self.waited = waited

    def __str__(self):
        return f"Job {self.job_id} expired after waiting {self.waited:.3f}s in queue"


class LimiterClosed(RiotAPIException):
    def __init__(self, job_id: str):
        super().__init__(job_id)
        self.job_id = job_id

    def __str__(self):
        return f"Job {self.job_id} dropped, the rate limiter was closed"


class DDragonError(RiotAPIException):
    def __init__(self, status_code: int, url: str):
        super().__init__(status_code, url)
        self.status_code = status_code
        self.url = url

    def __str__(self):
        return f"<{self.status_code}> {self.url}"


# 400	Bad request
# 401	Unauthorized
# 403	Forbidden
# 404	Data not found
# 405	Method not allowed
# 415	Unsupported media type
# 429	Rate limit exceeded
# 500	Internal server error
# 502	Bad gateway
# 503	Service unavailable
# 504	Gateway timeout


class RiotAPIError(RiotAPIException):
    """A non-success response from the Riot API."""

    message = "Unexpected response"
    status_code = None

    def __init__(self, status_code: int = None, server_message: str = None, url: str = None, headers: dict = None):
        if status_code is not None:
            self.status_code = status_code
        self.server_message = server_message
        self.url = url
        self.headers = headers or {}
        super().__init__(self.status_code, self.message)

    def __str__(self):
        if self.server_message:
            return f"<{self.status_code}> {self.message}: {self.server_message}"
        return f"<{self.status_code}> {self.message}"


class BadRequest(RiotAPIError):
    message = "Bad request"
    status_code = 400


class Unauthorized(RiotAPIError):
    message = "Unauthorized"
    status_code = 401


class Forbidden(RiotAPIError):
    message = "Forbidden"
    status_code = 403


class DataNotFound(RiotAPIError):
    message = "Data not found"
    status_code = 404


class MethodNotAllowed(RiotAPIError):
    message = "Method not allowed"
    status_code = 405


class UnsupportedMediaType(RiotAPIError):
    message = "Unsupported media type"
    status_code = 415


class RateLimitExceeded(RiotAPIError):
    message = "Rate limit exceeded"
    status_code = 429


class InternalServerError(RiotAPIError):
    message = "Internal server error"
    status_code = 500


class BadGateway(RiotAPIError):
    message = "Bad gateway"
    status_code = 502


class ServiceUnavailable(RiotAPIError):
    message = "Service unavailable"
    status_code = 503


class GatewayTimeout(RiotAPIError):
    message = "Gateway timeout"
    status_code = 504


exceptions = {
    # Client side
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: DataNotFound,
    405: MethodNotAllowed,
    415: UnsupportedMediaType,
    429: RateLimitExceeded,

    # Server side
    500: InternalServerError,
    502: BadGateway,
    503: ServiceUnavailable,
    504: GatewayTimeout,
}


def from_status(status_code: int, server_message: str = None, url: str = None, headers: dict = None) -> RiotAPIError:
    """Builds the exception matching an HTTP status code."""
    exception = exceptions.get(status_code, RiotAPIError)
    return exception(status_code=status_code, server_message=server_message, url=url, headers=headers)
