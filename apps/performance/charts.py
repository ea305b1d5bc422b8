import plotly.graph_objects as go

from .schemas import COMPARISON_SERIES, MONTHLY_SERIES

PIE_COLORS = ['#4f46e5', '#10b981', '#f59e0b']

LINE_COLOR = '#4f46e5'
BAR_COLOR = '#10b981'
AXIS_COLOR = '#64748b'
GRID_COLOR = '#e0e0e0'

CHART_HEIGHT = 320


def _base_layout(fig):
    fig.update_layout(
        height=CHART_HEIGHT,
        margin=dict(t=10, r=20, l=10, b=10),
        plot_bgcolor='white',
        paper_bgcolor='white',
        showlegend=True,
        legend=dict(orientation='h', yanchor='bottom', y=-0.3, xanchor='center', x=0.5),
    )
    return fig


# =========================================================
# MONTHLY TREND (WORK DAYS)
# =========================================================
def monthly_trend_chart(points):
    # points arrive in chronological order; do not re-sort
    fig = go.Figure()

    fig.add_scatter(
        x=[p.name for p in points],
        y=[p.work_days for p in points],
        name=MONTHLY_SERIES,
        mode='lines+markers',
        line=dict(color=LINE_COLOR, width=2, shape='spline'),
    )

    fig.update_xaxes(color=AXIS_COLOR, gridcolor=GRID_COLOR, griddash='dash')
    fig.update_yaxes(color=AXIS_COLOR, gridcolor=GRID_COLOR, griddash='dash')

    return _base_layout(fig)


# =========================================================
# DISTRICT COMPARISON (EXPENDITURE)
# =========================================================
def district_comparison_chart(points):
    fig = go.Figure()

    fig.add_bar(
        x=[p.expenditure for p in points],
        y=[p.name for p in points],
        name=COMPARISON_SERIES,
        orientation='h',
        marker=dict(color=BAR_COLOR),
    )

    fig.update_xaxes(type='linear', color=AXIS_COLOR, gridcolor=GRID_COLOR, griddash='dash')
    # first point on top, matching the order sent by the API
    fig.update_yaxes(type='category', color=AXIS_COLOR, autorange='reversed')

    return _base_layout(fig)


# =========================================================
# FUND UTILIZATION
# =========================================================
def fund_breakdown_chart(slices):
    colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(slices))]

    fig = go.Figure()

    fig.add_pie(
        labels=[s.name for s in slices],
        values=[s.value for s in slices],
        marker=dict(colors=colors),
        textinfo='none',
        sort=False,
    )

    return _base_layout(fig)


def chart_html(fig):
    """Embeddable <div> for a figure; plotly.js is loaded once by the page"""
    return fig.to_html(
        full_html=False,
        include_plotlyjs=False,
        config={'displayModeBar': False, 'responsive': True},
    )


def dashboard_charts(payload):
    return {
        'monthly': monthly_trend_chart(payload.monthly),
        'comparison': district_comparison_chart(payload.comparison),
        'funds': fund_breakdown_chart(payload.funds),
    }
