GENERIC_FETCH_ERROR = 'Failed to fetch data. Please try again.'


class DashboardError(Exception):
    """Base error for a failed dashboard fetch; `message` is shown to the user"""

    def __init__(self, message=None):
        self.message = message or GENERIC_FETCH_ERROR
        super().__init__(self.message)


class DashboardHTTPError(DashboardError):
    """The dashboard API answered with a non-2xx status"""

    def __init__(self, status_code, message=None):
        self.status_code = status_code
        super().__init__(message or f'HTTP error! status: {status_code}')


class DashboardNetworkError(DashboardError):
    """The request never completed (connection refused, DNS, timeout...)"""


class MalformedResponseError(DashboardError):
    """A 2xx response whose body is not a valid dashboard payload"""

    def __init__(self, detail=None):
        self.detail = detail
        message = 'Malformed response from dashboard API'
        if detail:
            message = f'{message}: {detail}'
        super().__init__(message)
