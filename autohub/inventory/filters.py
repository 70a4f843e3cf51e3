import django_filters
from .models import Vehicle


class VehicleFilter(django_filters.FilterSet):
    brand = django_filters.CharFilter(field_name="brand", lookup_expr="icontains")
    type = django_filters.CharFilter(field_name="vehicle_type")
    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    minYear = django_filters.NumberFilter(field_name="year", lookup_expr="gte")
    maxYear = django_filters.NumberFilter(field_name="year", lookup_expr="lte")
    # unknown statuses match nothing rather than failing the request
    status = django_filters.CharFilter(field_name="status")

    class Meta:
        model = Vehicle
        fields = []

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        # the public listing shows open listings unless a status is asked for
        if not self.form.cleaned_data.get("status"):
            queryset = queryset.filter(status=Vehicle.STATUS_AVAILABLE)
        return queryset
