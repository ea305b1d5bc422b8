"""Tests for the dashboard API client."""

import pytest
import requests

from apps.performance.exceptions import (
    DashboardHTTPError,
    DashboardNetworkError,
    MalformedResponseError,
)
from apps.performance.schemas import DashboardPayload
from apps.performance.services import DashboardDataService


def test_request_targets_dashboard_endpoint(mock_get, api_response, empty_payload):
    mock_get.return_value = api_response(200, empty_payload)

    DashboardDataService().fetch_dashboard('Puri', '3-months')

    mock_get.assert_called_once_with(
        'http://api.test/api/data/dashboard',
        params={'district': 'Puri', 'period': '3-months'},
        timeout=5,
    )


def test_base_url_trailing_slash_is_dropped():
    service = DashboardDataService(base_url='http://backend:5000/', timeout=1)
    assert service.dashboard_url == 'http://backend:5000/api/data/dashboard'


def test_success_returns_validated_payload(mock_get, api_response, full_payload):
    mock_get.return_value = api_response(200, full_payload)

    payload = DashboardDataService().fetch_dashboard('Angul', 'current')

    assert isinstance(payload, DashboardPayload)
    assert payload.kpi.funds == '₹12L'
    assert [p.name for p in payload.monthly] == ['Jan', 'Feb', 'Mar']


def test_http_error_uses_body_message(mock_get, api_response):
    mock_get.return_value = api_response(404, {'message': 'no data for district'})

    with pytest.raises(DashboardHTTPError) as exc_info:
        DashboardDataService().fetch_dashboard('Boudh', 'current')

    assert exc_info.value.message == 'no data for district'
    assert exc_info.value.status_code == 404


def test_http_error_with_unparseable_body_reports_status(mock_get, api_response):
    mock_get.return_value = api_response(500, json_error=True)

    with pytest.raises(DashboardHTTPError) as exc_info:
        DashboardDataService().fetch_dashboard('Boudh', 'current')

    assert exc_info.value.message == 'HTTP error! status: 500'


@pytest.mark.parametrize('body', [{}, {'message': ''}, {'error': 'oops'}, ['not', 'a', 'dict']])
def test_http_error_without_message_reports_status(mock_get, api_response, body):
    mock_get.return_value = api_response(503, body)

    with pytest.raises(DashboardHTTPError) as exc_info:
        DashboardDataService().fetch_dashboard('Boudh', 'current')

    assert exc_info.value.message == 'HTTP error! status: 503'


def test_network_failure_carries_description(mock_get):
    mock_get.side_effect = requests.ConnectionError('Connection refused')

    with pytest.raises(DashboardNetworkError) as exc_info:
        DashboardDataService().fetch_dashboard('Puri', 'current')

    assert exc_info.value.message == 'Connection refused'


def test_network_failure_without_description_uses_fallback(mock_get):
    mock_get.side_effect = requests.Timeout()

    with pytest.raises(DashboardNetworkError) as exc_info:
        DashboardDataService().fetch_dashboard('Puri', 'current')

    assert exc_info.value.message == 'Failed to fetch data. Please try again.'


def test_success_with_non_json_body_is_malformed(mock_get, api_response):
    mock_get.return_value = api_response(200, json_error=True)

    with pytest.raises(MalformedResponseError):
        DashboardDataService().fetch_dashboard('Puri', 'current')


def test_success_with_missing_bucket_is_malformed(mock_get, api_response, empty_payload):
    del empty_payload['fundData']
    mock_get.return_value = api_response(200, empty_payload)

    with pytest.raises(MalformedResponseError) as exc_info:
        DashboardDataService().fetch_dashboard('Puri', 'current')

    assert 'fundData' in exc_info.value.message


def test_success_with_array_body_is_malformed(mock_get, api_response):
    mock_get.return_value = api_response(200, [])

    with pytest.raises(MalformedResponseError) as exc_info:
        DashboardDataService().fetch_dashboard('Puri', 'current')

    assert 'list' in exc_info.value.message
