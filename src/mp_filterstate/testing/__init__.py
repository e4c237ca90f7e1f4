"""Testing support – fakes and property-based generators.

The generators need ``hypothesis`` (``pip install "mp-filterstate[test]"``).
"""

from mp_filterstate.testing.fakes import (
    FakeStorageBackend,
    GatedDigestProvider,
    UnavailableDigestProvider,
)
from mp_filterstate.testing.generators import (
    filter_state_strategy,
    filters_strategy,
    primitive_strategy,
    sorts_strategy,
)

__all__ = [
    "FakeStorageBackend",
    "GatedDigestProvider",
    "UnavailableDigestProvider",
    "filter_state_strategy",
    "filters_strategy",
    "primitive_strategy",
    "sorts_strategy",
]
