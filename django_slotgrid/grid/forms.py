from django import forms
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Field, Layout, Row

from django_slotgrid.grid.constants import ColumnBucket, RowBucket
from django_slotgrid.grid.exceptions import InvalidBucket
from django_slotgrid.grid.spans import GridItemSpec


class SlotSpanForm(forms.Form):
    """Pick the declared full-width span of a slot."""

    column = forms.TypedChoiceField(
        choices=ColumnBucket.choices,
        coerce=int,
        initial=ColumnBucket.ONE,
        label="Column span",
        widget=forms.Select(attrs={"class": "form-select form-select-sm w-100"}),
    )
    row = forms.TypedChoiceField(
        choices=RowBucket.choices,
        coerce=int,
        initial=RowBucket.ONE,
        label="Row span",
        widget=forms.Select(attrs={"class": "form-select form-select-sm w-100"}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper = FormHelper()
        self.helper.form_tag = False  # outer form tag is in template
        self.helper.layout = Layout(
            Row(
                Column(Field("column"), css_class="col-md-6"),
                Column(Field("row"), css_class="col-md-6"),
            )
        )

    def clean(self):
        cleaned = super().clean()
        column = cleaned.get("column")
        row = cleaned.get("row")
        if column is None or row is None:
            return cleaned
        try:
            cleaned["spec"] = GridItemSpec(column, row)
        except InvalidBucket as exc:
            raise forms.ValidationError(str(exc))
        return cleaned


class ViewportForm(forms.Form):
    width = forms.FloatField(min_value=0, label="Viewport width (px)")


class ResolveSpanForm(SlotSpanForm, ViewportForm):
    """Slot declaration plus the viewport width to resolve it at."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.helper.layout.fields.append(Row(Column(Field("width"), css_class="col-12")))
