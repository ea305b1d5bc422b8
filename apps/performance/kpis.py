from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class StatCard:
    """One KPI card: label, value shown verbatim, optional unit and change"""
    title: str
    value: Union[int, float, str]
    icon: str
    change: Optional[str] = None
    unit: Optional[str] = None

    @property
    def display(self):
        if self.unit:
            return f"{self.value} {self.unit}"
        return f"{self.value}"

    @property
    def change_display(self):
        if not self.change:
            return None
        return f"{self.change}%"

    @property
    def trend(self):
        if not self.change:
            return None
        return 'up' if self.change.startswith('+') else 'down'


def build_stat_cards(kpi):
    """The six KPI cards of the report, in display order"""
    return [
        StatCard('Households Employed', kpi.households, icon='users', change=kpi.change),
        StatCard('Total Work Days', kpi.work_days, icon='calendar-days'),
        StatCard('Funds Disbursed', kpi.funds, icon='banknote'),
        StatCard('Works Completed', kpi.completed, icon='check-circle'),
        StatCard('Average Wage Paid', kpi.average_wage, icon='indian-rupee', unit='per day'),
        StatCard('Work Completion Rate', kpi.completion_rate, icon='percent', unit='%'),
    ]
