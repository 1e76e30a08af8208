"""Domain Value Objects."""

from recycle_score.domain.value_objects.address_aggregate import AddressAggregate

__all__ = ["AddressAggregate"]
