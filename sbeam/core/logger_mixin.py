import logging
from typing import Any, Iterable, Sequence

from tabulate import tabulate


class LoggerMixin:
    """
    Mixin attaching a class-specific logger to its subclasses.

    Adapted from the ``LoggerMixin`` of sStatics: same handler and level
    handling, same ``__post_init__`` hook for dataclasses.

    The logger is named ``<module>.<class>``, does not propagate to the root
    logger and stays silent (WARNING level, :any:`logging.NullHandler`)
    unless the instance is created with ``debug=True``. In that case a single
    :any:`logging.StreamHandler` is attached and the level drops to DEBUG.

    Dataclasses that declare a ``debug`` field get their ``__post_init__``
    wrapped so that the logger is available inside it.

    Parameters
    ----------
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.

    Attributes
    ----------
    logger : logging.Logger
        A logger instance configured for the specific subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """The logger of this instance."""
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = "debug" in getattr(cls, "__annotations__", {})

        # Dataclass: set up the logger right before __post_init__ runs.
        orig_post = getattr(cls, "__post_init__", None)
        if orig_post is not None and has_debug:
            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            cls.__post_init__ = wrapped_post
            return

        # Plain class with its own __init__.
        orig_init = getattr(cls, "__init__", None)
        if orig_init is not LoggerMixin.__init__:

            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                if orig_init is not None:
                    return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_quantities(
        rows: Iterable[Sequence[Any]],
        headers: Sequence[str] = ("Quantity", "Symbol", "Value", "Unit"),
        decimals: int = 6
):
    """Renders ``(name, symbol, value, unit)`` rows as a grid table.

    Used to dump section parameters and analysis results into debug logs
    and into :py:meth:`AnalysisResult.summary`.
    """
    return tabulate(list(rows), headers=list(headers), tablefmt="grid",
                    floatfmt=f".{decimals}f")


def table_diagram(stations, moments, decimals: int = 3):
    """Renders the sampled moment diagram as a two-column grid table."""
    data = [[x, m] for x, m in zip(stations, moments)]
    return tabulate(data, headers=["x (mm)", "M (kNm)"], tablefmt="grid",
                    floatfmt=f".{decimals}f")
