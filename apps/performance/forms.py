from django import forms
from apps.districts.constants import DEFAULT_PERIOD, DEFAULT_STATE, ODISHA_DISTRICTS, PERIOD_CHOICES
from .state import DEFAULT_SELECTION, Selection


class SelectionForm(forms.Form):
    """District and period selectors; only listed values are accepted"""

    district = forms.ChoiceField(
        choices=[(name, name) for name in ODISHA_DISTRICTS],
        required=False,
    )
    period = forms.ChoiceField(choices=PERIOD_CHOICES, required=False)

    def clean_district(self):
        return self.cleaned_data.get('district') or DEFAULT_SELECTION.district

    def clean_period(self):
        return self.cleaned_data.get('period') or DEFAULT_PERIOD

    def selection(self):
        if not self.is_valid():
            raise ValueError('selection requested from an invalid form')
        return Selection(
            district=self.cleaned_data['district'],
            period=self.cleaned_data['period'],
            state=DEFAULT_STATE,
        )

    def error_message(self):
        """Flatten field errors into one line for the error panel"""
        parts = []
        for field, errors in self.errors.items():
            parts.append(f"{field}: {' '.join(errors)}")
        return 'Invalid selection. ' + '; '.join(parts)
