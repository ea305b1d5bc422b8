"""
View state for the dashboard page.

`DashboardState` owns the selection and the loading/error/data bundle. Every
selection change starts a `FetchCycle`; each cycle is tagged with a sequence
number and only the latest cycle may write its outcome, so a response that
arrives after a newer selection is discarded instead of overwriting it.
"""
import logging
from dataclasses import dataclass, replace

from apps.districts.constants import DEFAULT_PERIOD, DEFAULT_STATE, ODISHA_DISTRICTS
from .exceptions import DashboardError

logger = logging.getLogger(__name__)

STATUS_LOADING = 'loading'
STATUS_ERROR = 'error'
STATUS_READY = 'ready'


@dataclass(frozen=True)
class Selection:
    district: str
    period: str = DEFAULT_PERIOD
    state: str = DEFAULT_STATE


DEFAULT_SELECTION = Selection(district=ODISHA_DISTRICTS[0])


class DashboardState:

    def __init__(self, selection=None):
        self.selection = selection or DEFAULT_SELECTION
        self.loading = True
        self.error = None
        self.data = None
        self._sequence = 0

    @property
    def status(self):
        if self.loading:
            return STATUS_LOADING
        if self.error is not None:
            return STATUS_ERROR
        if self.data is not None:
            return STATUS_READY
        return STATUS_LOADING

    @property
    def sequence(self):
        return self._sequence

    def set_district(self, district):
        return self.select(replace(self.selection, district=district))

    def set_period(self, period):
        return self.select(replace(self.selection, period=period))

    def select(self, selection):
        """Replace the selection and start a new fetch cycle for it"""
        self.selection = selection
        self._sequence += 1
        # drop the previous district's numbers while the new request is in flight
        self.loading = True
        self.error = None
        self.data = None
        logger.debug(f"Fetch cycle #{self._sequence} started for {selection}")
        return FetchCycle(self, self._sequence, selection)

    def is_current(self, sequence):
        return sequence == self._sequence

    def _resolve(self, sequence, payload):
        if not self.is_current(sequence):
            logger.warning(f"Discarding stale response of cycle #{sequence} (current #{self._sequence})")
            return False
        self.error = None
        self.data = payload
        return True

    def _reject(self, sequence, message):
        if not self.is_current(sequence):
            logger.warning(f"Discarding stale error of cycle #{sequence}: {message}")
            return False
        self.data = None
        self.error = message
        return True

    def _settle(self, sequence):
        if self.is_current(sequence):
            self.loading = False


class FetchCycle:
    """One loading -> (error | ready) run for a selection"""

    def __init__(self, state, sequence, selection):
        self.state = state
        self.sequence = sequence
        self.selection = selection

    @property
    def stale(self):
        return not self.state.is_current(self.sequence)

    def resolve(self, payload):
        return self.state._resolve(self.sequence, payload)

    def reject(self, message):
        return self.state._reject(self.sequence, message)

    def settle(self):
        self.state._settle(self.sequence)

    def run(self, service):
        """Fetch through `service` and apply the outcome; loading is always cleared"""
        try:
            payload = service.fetch_dashboard(self.selection.district, self.selection.period)
        except DashboardError as e:
            logger.error(f"Fetch error: {e.message}")
            self.reject(e.message)
        else:
            self.resolve(payload)
        finally:
            self.settle()
        return self.state
