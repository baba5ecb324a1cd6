"""Domain errors for region operations.

Every error carries a stable ``code`` (also the message key used by
``georegion.i18n``) and structured ``params``. Nothing here holds
user-facing text; the HTTP layer renders it.
"""
from typing import Any, Optional


class RegionError(Exception):
    """Base class for region domain errors."""

    code = "region.error"

    def __init__(self, params: Optional[dict[str, Any]] = None):
        self.params = params or {}
        super().__init__(self.code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, params={self.params!r})"


class PolygonValidationError(RegionError):
    """The supplied ring is not a valid closed polygon."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__({"kind": kind.value})

    @property
    def code(self) -> str:
        return self.kind.code


class UnsupportedUnitError(RegionError):
    """Distance unit outside meters / kilometers / miles."""

    code = "region.unsupported_unit"

    def __init__(self, unit: Any):
        self.unit = unit
        super().__init__({"unit": str(unit)})


class RegionNotFoundError(RegionError):
    """No region with the given id."""

    code = "region.not_found"

    def __init__(self, region_id: Any):
        self.region_id = region_id
        super().__init__({"id": str(region_id)})


class StoreUnavailableError(RegionError):
    """The region store could not be reached."""

    code = "region.store_unavailable"

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__({"reason": reason} if reason else None)
