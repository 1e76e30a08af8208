"""History Queries."""

from recycle_score.application.history.queries.list_addresses import (
    ListAddressesQuery,
    ListAddressesRequest,
    coerce_page_param,
)

__all__ = ["ListAddressesQuery", "ListAddressesRequest", "coerce_page_param"]
