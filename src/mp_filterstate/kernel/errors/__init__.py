"""Kernel error hierarchy.

Hierarchy::

    FilterStateError
    ├── UnavailableCryptoError   (crypto.py)
    └── ConfigError              (mp_filterstate.config.errors)
        └── InvalidSettingValueError
"""

from mp_filterstate.kernel.errors.base import FilterStateError
from mp_filterstate.kernel.errors.crypto import UnavailableCryptoError

__all__ = ["FilterStateError", "UnavailableCryptoError"]
