DEFAULT_STATE = 'Odisha'

ODISHA_DISTRICTS = [
    'Angul', 'Balangir', 'Balasore', 'Bargarh', 'Bhadrak', 'Boudh', 'Cuttack',
    'Deogarh', 'Dhenkanal', 'Gajapati', 'Ganjam', 'Jagatsinghpur', 'Jajpur',
    'Jharsuguda', 'Kalahandi', 'Kandhamal', 'Kendrapara', 'Keonjhar', 'Khordha',
    'Koraput', 'Malkangiri', 'Mayurbhanj', 'Nabarangpur', 'Nayagarh', 'Nuapada',
    'Puri', 'Rayagada', 'Sambalpur', 'Subarnapur', 'Sundargarh',
]

DISTRICTS_BY_STATE = {
    DEFAULT_STATE: ODISHA_DISTRICTS,
}

PERIOD_CURRENT = 'current'
PERIOD_3_MONTHS = '3-months'
PERIOD_6_MONTHS = '6-months'

PERIOD_CHOICES = [
    (PERIOD_CURRENT, 'Current Month'),
    (PERIOD_3_MONTHS, 'Last 3 Months'),
    (PERIOD_6_MONTHS, 'Last 6 Months'),
]

DEFAULT_PERIOD = PERIOD_CURRENT


def districts_for_state(state):
    """Return the district list for a state, empty if the state is unknown"""
    return list(DISTRICTS_BY_STATE.get(state, []))


def is_valid_district(district, state=DEFAULT_STATE):
    return district in DISTRICTS_BY_STATE.get(state, [])


def period_label(period):
    return dict(PERIOD_CHOICES).get(period, period)
