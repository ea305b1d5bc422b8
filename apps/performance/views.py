from django.shortcuts import render
from django.http import JsonResponse
from dataclasses import asdict
from apps.districts.constants import DEFAULT_STATE, PERIOD_CHOICES, districts_for_state
from .charts import chart_html, dashboard_charts
from .forms import SelectionForm
from .kpis import build_stat_cards
from .services import DashboardDataService
from .state import DashboardState, STATUS_READY
import logging

logger = logging.getLogger(__name__)

def run_fetch_cycle(selection):
    """Run one fetch cycle for a selection and return the settled state"""
    state = DashboardState()
    cycle = state.select(selection)
    return cycle.run(DashboardDataService())

def dashboard(request):
    """Render the district report for the selected district and period"""
    form = SelectionForm(request.GET)
    status_code = 200

    if form.is_valid():
        state = run_fetch_cycle(form.selection())
    else:
        # never fetch for a selection the selectors could not have produced
        logger.warning(f"Rejected dashboard selection: {form.errors.as_json()}")
        state = DashboardState()
        state.loading = False
        state.error = form.error_message()
        status_code = 400

    context = {
        'state': state,
        'selection': state.selection,
        'selected_state': DEFAULT_STATE,
        'districts': districts_for_state(DEFAULT_STATE),
        'periods': PERIOD_CHOICES,
        'stat_cards': [],
        'charts': {},
    }

    if state.status == STATUS_READY:
        figures = dashboard_charts(state.data)
        context['stat_cards'] = build_stat_cards(state.data.kpi)
        context['figures'] = figures
        context['charts'] = {name: chart_html(fig) for name, fig in figures.items()}

    return render(request, 'performance/dashboard.html', context, status=status_code)

def dashboard_data(request):
    """Same fetch cycle as the page, answered as JSON"""
    form = SelectionForm(request.GET)

    if not form.is_valid():
        return JsonResponse({'status': 'error', 'message': form.error_message()}, status=400)

    state = run_fetch_cycle(form.selection())

    if state.status != STATUS_READY:
        return JsonResponse({
            'status': 'error',
            'selection': asdict(state.selection),
            'message': state.error,
        }, status=502)

    data = {
        'status': 'ready',
        'selection': asdict(state.selection),
    }
    data.update(state.data.to_api())
    return JsonResponse(data)
