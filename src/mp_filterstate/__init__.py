"""
mp_filterstate – filter/pagination state synchronisation.

Import path convention::

    from mp_filterstate.application.filtering import FilterStore, QueryCodec
    from mp_filterstate.adapters.storage import InMemoryStorageBackend, NamespacedStorage
    from mp_filterstate.kernel.errors import UnavailableCryptoError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
