"""History Ports."""

from recycle_score.application.history.ports.address_aggregate_reader import (
    AddressAggregateReader,
)

__all__ = ["AddressAggregateReader"]
