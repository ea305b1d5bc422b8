"""Test configuration and shared fixtures."""

from unittest.mock import Mock, patch

import pytest
import requests

API_URL = 'http://api.test'


def make_response(status_code=200, body=None, json_error=False):
    """Build a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
    else:
        response.json.return_value = body
    return response


@pytest.fixture(autouse=True)
def dashboard_api(settings):
    settings.DASHBOARD_API_BASE_URL = API_URL
    settings.DASHBOARD_API_TIMEOUT = 5
    return API_URL


@pytest.fixture
def kpi_body():
    return {
        'households': 120,
        'workDays': 4500,
        'funds': '₹12L',
        'completed': 30,
        'averageWage': 220,
        'completionRate': 75,
    }


@pytest.fixture
def empty_payload(kpi_body):
    return {
        'kpiData': kpi_body,
        'monthlyData': [],
        'comparisonData': [],
        'fundData': [],
    }


@pytest.fixture
def full_payload(kpi_body):
    return {
        'kpiData': dict(kpi_body, change='+4.2'),
        'monthlyData': [
            {'name': 'Jan', 'Work Days (in Lakhs)': 4.1},
            {'name': 'Feb', 'Work Days (in Lakhs)': 3.6},
            {'name': 'Mar', 'Work Days (in Lakhs)': 5.2},
        ],
        'comparisonData': [
            {'name': 'Mayurbhanj', 'Expenditure (Cr)': 210.5},
            {'name': 'Ganjam', 'Expenditure (Cr)': 180},
        ],
        'fundData': [
            {'name': 'Wages', 'value': 65},
            {'name': 'Materials', 'value': 25},
            {'name': 'Admin', 'value': 10},
        ],
    }


@pytest.fixture
def mock_get():
    """Patch the outbound GET used by the dashboard service."""
    with patch('apps.performance.services.requests.get') as get:
        yield get


@pytest.fixture
def api_response():
    return make_response
