"""State/store layer.

:class:`~neurofleet.state.store.FleetStore` is the single owner of the
session's vehicles, alerts, notifications and environment readings.
Everything else reads snapshots from it and writes through its methods.
"""

from neurofleet.state.store import FleetStore

__all__ = ["FleetStore"]
