"""Testing fakes – in-memory doubles for storage and digest ports."""
from mp_filterstate.testing.fakes.digest import GatedDigestProvider, UnavailableDigestProvider
from mp_filterstate.testing.fakes.storage import FakeStorageBackend

__all__ = ["FakeStorageBackend", "GatedDigestProvider", "UnavailableDigestProvider"]
