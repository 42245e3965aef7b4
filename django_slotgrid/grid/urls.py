from django.urls import path

from django_slotgrid.grid.views import GridStylesheetView, ResolveSpanView, SpanTableView

app_name = "slotgrid"

urlpatterns = [
    path("resolve/", ResolveSpanView.as_view(), name="resolve_span"),
    path("table/", SpanTableView.as_view(), name="span_table"),
    path("grid.css", GridStylesheetView.as_view(), name="grid_css"),
]
