import math
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Mapping

from sbeam.core import defaults
from sbeam.core.exceptions import MalformedInput, MissingInput


class LoadCaseKind(str, Enum):
    """Supported load cases of a single member."""

    CENTRAL_POINT = 'central'
    TRAPEZOID = 'trapezoid'
    CANTILEVER_POINT = 'cantilever'
    APPLIED_MOMENT = 'moment'

    @classmethod
    def parse(cls, kind):
        """Accepts a member, its value or its name (case-insensitive).

        Raises
        ------
        MissingInput
            If ``kind`` is :python:`None`.
        MalformedInput
            If ``kind`` names no load case.
        """
        if kind is None:
            raise MissingInput('The load case kind is missing.')
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            key = kind.strip()
            try:
                return cls(key.lower())
            except ValueError:
                if key.upper() in cls.__members__:
                    return cls[key.upper()]
        raise MalformedInput(f'Unknown load case {kind!r}.')


@dataclass(frozen=True)
class LoadInput:
    r"""Common inputs of all load cases.

    Parameters
    ----------
    buckling_length : :any:`float`, default=0.0
        Unsupported length :math:`L_b` for lateral-torsional buckling in mm.
        Zero means no buckling reduction.
    young_mod : :any:`float`, default=205000.0
        Young's modulus :math:`E` in N/mm².

    Raises
    ------
    MissingInput
        If a value is :python:`None`.
    MalformedInput
        If a value is not a finite number, :py:attr:`buckling_length` is
        negative or :py:attr:`young_mod` is not greater than zero.
    """

    kind = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                raise MissingInput(
                    f'{type(self).__name__}: {f.name} is required.')
            if not isinstance(value, Real) or isinstance(value, bool):
                raise MalformedInput(
                    f'{type(self).__name__}: {f.name} has to be a number.')
            if not math.isfinite(value):
                raise MalformedInput(
                    f'{type(self).__name__}: {f.name} has to be finite.')
        if self.buckling_length < 0:
            raise MalformedInput(
                'buckling_length has to be greater than or equal to zero.')
        if self.young_mod <= 0:
            raise MalformedInput('young_mod has to be greater than zero.')

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float] | None):
        """Creates the load from a mapping of field names.

        Fields with a default may be omitted; all others are required.

        Raises
        ------
        MissingInput
            If ``mapping`` is :python:`None` or lacks a required field.
        MalformedInput
            If ``mapping`` contains unknown keys.
        """
        if mapping is None:
            raise MissingInput(f'{cls.__name__}: load inputs are missing.')
        names = {f.name for f in fields(cls)}
        unknown = set(mapping) - names
        if unknown:
            raise MalformedInput(
                f'{cls.__name__}: unknown inputs '
                f'{", ".join(sorted(unknown))}.'
            )
        try:
            return cls(**mapping)
        except TypeError as e:
            raise MissingInput(f'{cls.__name__}: {e}') from e


@dataclass(frozen=True)
class CentralPointLoad(LoadInput):
    """Point load :math:`P` in kN at midspan of a simply supported member.
    """

    load: float
    buckling_length: float = defaults.BUCKLING_LENGTH
    young_mod: float = defaults.YOUNG_MOD

    kind = LoadCaseKind.CENTRAL_POINT


@dataclass(frozen=True)
class TrapezoidLoad(LoadInput):
    r"""Trapezoidal line load on a simply supported member.

    An area load :math:`W` in kN/m² acts on the member over the dominating
    width :math:`D_W` in mm; the line load rises linearly from both supports
    and is constant in between.

    Raises
    ------
    MalformedInput
        If :py:attr:`width` is not greater than zero.
    """

    load: float
    width: float = defaults.TRAPEZOID_WIDTH
    buckling_length: float = defaults.BUCKLING_LENGTH
    young_mod: float = defaults.YOUNG_MOD

    kind = LoadCaseKind.TRAPEZOID

    def __post_init__(self):
        super().__post_init__()
        if self.width <= 0:
            raise MalformedInput('width has to be greater than zero.')

    @property
    def line_load(self) -> float:
        """Peak line load :math:`q = W \\cdot D_W / 1000` in N/mm."""
        return self.load * (self.width / defaults.MM_PER_M)


@dataclass(frozen=True)
class CantileverPointLoad(LoadInput):
    """Point load :math:`P` in kN at the free tip of a cantilever."""

    load: float
    buckling_length: float = defaults.BUCKLING_LENGTH
    young_mod: float = defaults.YOUNG_MOD

    kind = LoadCaseKind.CANTILEVER_POINT


@dataclass(frozen=True)
class AppliedMoment(LoadInput):
    """Moment :math:`M` in kNm, constant along the member."""

    moment: float
    buckling_length: float = defaults.BUCKLING_LENGTH
    young_mod: float = defaults.YOUNG_MOD

    kind = LoadCaseKind.APPLIED_MOMENT


LOAD_TYPES = {
    cls.kind: cls
    for cls in (CentralPointLoad, TrapezoidLoad, CantileverPointLoad,
                AppliedMoment)
}
