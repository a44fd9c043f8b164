
class SBeamError(ValueError):
    """Base class of all errors raised by :py:mod:`sbeam`.

    Derives from :any:`ValueError` so that callers which only expect the
    usual input validation errors keep working.
    """


class InvalidGeometry(SBeamError):
    """A cross-section dimension is non-positive, non-finite or degenerate
    (e.g. the torsional radius of gyration cannot be computed)."""


class MissingInput(SBeamError):
    """A required value is absent (:python:`None` or a missing key)."""


class MalformedInput(SBeamError):
    """A value has the wrong shape, length, type or range."""
