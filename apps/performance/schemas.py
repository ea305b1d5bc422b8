"""
Pydantic schemas for the dashboard API payload.

The remote endpoint returns camelCase keys and, for the chart series, the
series label itself as the key (e.g. "Work Days (in Lakhs)"). Fields are
declared snake_case with the wire name as alias.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# KPI values are either numbers or preformatted display strings ("₹12L")
KpiValue = Union[int, float, str]

MONTHLY_SERIES = 'Work Days (in Lakhs)'
COMPARISON_SERIES = 'Expenditure (Cr)'


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class KpiSnapshot(_WireModel):
    """The six summary numbers for a district/period."""
    households: KpiValue
    work_days: KpiValue = Field(alias='workDays')
    funds: KpiValue
    completed: KpiValue
    average_wage: KpiValue = Field(alias='averageWage')
    completion_rate: KpiValue = Field(alias='completionRate')
    change: Optional[str] = None  # signed percentage, e.g. "+4.2"


class MonthlyTrendPoint(_WireModel):
    name: str
    work_days: float = Field(alias=MONTHLY_SERIES)


class ComparisonPoint(_WireModel):
    name: str
    expenditure: float = Field(alias=COMPARISON_SERIES)


class FundSlice(_WireModel):
    name: str
    value: float


class DashboardPayload(_WireModel):
    """Success body of GET /api/data/dashboard."""
    kpi: KpiSnapshot = Field(alias='kpiData')
    monthly: List[MonthlyTrendPoint] = Field(alias='monthlyData')
    comparison: List[ComparisonPoint] = Field(alias='comparisonData')
    funds: List[FundSlice] = Field(alias='fundData')

    def to_api(self) -> dict:
        """Re-emit the payload in its wire shape"""
        return self.model_dump(by_alias=True, exclude_none=True)
