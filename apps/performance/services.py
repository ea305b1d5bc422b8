import requests
import logging
from django.conf import settings
from pydantic import ValidationError
from .exceptions import DashboardHTTPError, DashboardNetworkError, MalformedResponseError
from .schemas import DashboardPayload

logger = logging.getLogger(__name__)

class DashboardDataService:
    """Service to fetch the dashboard payload for a district from the backend API"""

    DASHBOARD_PATH = '/api/data/dashboard'

    def __init__(self, base_url=None, timeout=None):
        if base_url is None:
            base_url = settings.DASHBOARD_API_BASE_URL
        if timeout is None:
            timeout = settings.DASHBOARD_API_TIMEOUT

        self.base_url = str(base_url).rstrip('/')
        self.timeout = timeout

    @property
    def dashboard_url(self):
        return f"{self.base_url}{self.DASHBOARD_PATH}"

    @staticmethod
    def error_message(response):
        """Pull `message` out of an error body, None if the body has none"""
        try:
            body = response.json()
        except ValueError:
            return None

        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return None

    def fetch_dashboard(self, district, period):
        """Fetch and validate the dashboard payload for a district and period"""
        params = {
            'district': district,
            'period': period,
        }

        logger.info(f"Fetching dashboard data: {self.dashboard_url} with params: {params}")

        try:
            response = requests.get(self.dashboard_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Dashboard API request failed for {district} ({period}): {e}")
            raise DashboardNetworkError(str(e)) from e

        if not 200 <= response.status_code < 300:
            message = self.error_message(response)
            logger.error(
                f"Dashboard API returned {response.status_code} for {district} ({period}): "
                f"{message or 'no message'}"
            )
            raise DashboardHTTPError(response.status_code, message)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Dashboard API returned a non-JSON body for {district} ({period})")
            raise MalformedResponseError('body is not valid JSON') from e

        return self.parse_payload(data)

    @staticmethod
    def parse_payload(data):
        """Validate a decoded response body against the dashboard schema"""
        if not isinstance(data, dict):
            raise MalformedResponseError(f'expected a JSON object, got {type(data).__name__}')

        try:
            payload = DashboardPayload.model_validate(data)
        except ValidationError as e:
            fields = sorted({'.'.join(str(part) for part in err['loc']) for err in e.errors()})
            logger.error(f"Dashboard payload failed validation: {fields}")
            raise MalformedResponseError(f"invalid fields: {', '.join(fields)}") from e

        logger.info(
            f"Dashboard payload OK: {len(payload.monthly)} monthly points, "
            f"{len(payload.comparison)} comparison points, {len(payload.funds)} fund slices"
        )
        return payload
