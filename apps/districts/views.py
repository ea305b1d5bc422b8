from django.http import JsonResponse
from .constants import DEFAULT_STATE, DISTRICTS_BY_STATE, districts_for_state
import logging

logger = logging.getLogger(__name__)

def district_list(request):
    """List the districts offered by the selector for a state"""
    state = request.GET.get('state', DEFAULT_STATE)
    districts = districts_for_state(state)

    if not districts:
        logger.warning(f"No districts configured for state: {state}")

    data = {
        'state': state,
        'states': sorted(DISTRICTS_BY_STATE),
        'districts': districts,
        'count': len(districts),
    }
    return JsonResponse(data)
