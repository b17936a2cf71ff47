from typing import Any, Dict

import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    availability = django_filters.BooleanFilter(field_name="availability")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    class Meta:
        model = Product
        fields = ["name", "availability", "min_price", "max_price"]

    def lookups(self) -> Dict[str, Any]:
        """Cleaned query parameters as ORM look-ups for the repository.

        Only valid after ``is_valid()``; unset parameters are omitted.
        """
        lookups: Dict[str, Any] = {}
        for name, value in self.form.cleaned_data.items():
            if value is None or value == "":
                continue
            f = self.filters[name]
            lookups[f"{f.field_name}__{f.lookup_expr}"] = value
        return lookups
