"""URL configuration for the slot grid host project."""
from django.urls import include, path

urlpatterns = [
    path("slotgrid/", include("django_slotgrid.grid.urls")),
]
