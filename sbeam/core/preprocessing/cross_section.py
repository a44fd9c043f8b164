import abc
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import cached_property
from numbers import Real
from typing import Any, Mapping, Sequence

import numpy as np
from shapely.geometry import box
from shapely.ops import unary_union

from sbeam.core import defaults
from sbeam.core.exceptions import (
    InvalidGeometry, MalformedInput, MissingInput
)
from sbeam.core.logger_mixin import LoggerMixin, table_quantities


class SectionKind(IntEnum):
    """Selects the allowable bending stress rule of a cross-section.

    The integer values are the codes used in the flat parameter vector.
    """

    H_STRONG_AXIS = 0
    BOX_OR_ROUND = 1
    L_SHAPE_ASYMMETRIC = 2

    @classmethod
    def parse(cls, code):
        """Returns the member matching ``code`` or ``code`` itself.

        Unknown codes are passed through unchanged so that the allowable
        stress solver can report them as a failing check instead of raising.

        Examples
        --------
        >>> SectionKind.parse(2.0)
        <SectionKind.L_SHAPE_ASYMMETRIC: 2>
        >>> SectionKind.parse(99)
        99
        """
        if isinstance(code, cls):
            return code
        try:
            if float(code).is_integer():
                return cls(int(code))
        except (TypeError, ValueError, OverflowError):
            pass
        return code


class SectionFamily(str, Enum):
    """Parametrized cross-section families."""

    H = 'h'
    L = 'l'
    BOX = 'box'
    ROUND = 'round'


@dataclass(frozen=True)
class SectionParameters:
    r"""Section and member properties consumed by the load case evaluator.

    Parameters
    ----------
    height : :any:`float`
        Overall depth :math:`H` in mm.
    length : :any:`float`
        Member length :math:`L` in mm.
    yield_stress : :any:`float`
        Reference yield stress :math:`F` in N/mm².
    mom_of_int : :any:`float`
        Second moment of area :math:`I_y` about the bending axis in mm⁴.
    section_modulus : :any:`float`
        Elastic section modulus :math:`Z_y = I_y / (H / 2)` in mm³.
    section_kind : :any:`SectionKind` or raw code
        Allowable stress rule. Any value that is not a :any:`SectionKind`
        member is kept and makes the allowable stress zero.
    torsional_radius : :any:`float`, default=0.0
        Torsional radius of gyration :math:`i_t` in mm.
    slenderness : :any:`float`, default=0.0
        Reference slenderness :math:`\Lambda`.
    flange_area : :any:`float`, default=0.0
        Compression flange area :math:`A_f` in mm².

    Raises
    ------
    MissingInput
        If a value is :python:`None`.
    MalformedInput
        If a value is not a number or :py:attr:`section_modulus` differs
        from :math:`I_y / (H / 2)`.
    InvalidGeometry
        :py:attr:`height`, :py:attr:`length`, :py:attr:`yield_stress`,
        :py:attr:`mom_of_int` and :py:attr:`section_modulus` have to be
        greater than zero, the remaining values must not be negative.
        The H rule also needs positive :py:attr:`torsional_radius`,
        :py:attr:`slenderness` and :py:attr:`flange_area`, the L rule
        positive :py:attr:`torsional_radius` and :py:attr:`flange_area`.
    """

    height: float
    length: float
    yield_stress: float
    mom_of_int: float
    section_modulus: float
    section_kind: Any
    torsional_radius: float = 0.0
    slenderness: float = 0.0
    flange_area: float = 0.0

    _buckling_terms = {
        SectionKind.H_STRONG_AXIS: ('torsional_radius', 'slenderness',
                                    'flange_area'),
        SectionKind.L_SHAPE_ASYMMETRIC: ('torsional_radius', 'flange_area'),
    }

    def __post_init__(self):
        for name in ('height', 'length', 'yield_stress', 'mom_of_int',
                     'section_modulus'):
            value = self._number(name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidGeometry(f'{name} has to be greater than zero.')
        for name in ('torsional_radius', 'slenderness', 'flange_area'):
            value = self._number(name)
            if not math.isfinite(value) or value < 0:
                raise InvalidGeometry(
                    f'{name} has to be greater than or equal to zero.')
        kind = SectionKind.parse(self._number('section_kind'))
        object.__setattr__(self, 'section_kind', kind)

        expected = self.mom_of_int / (self.height / 2)
        if not math.isclose(self.section_modulus, expected, rel_tol=1e-9):
            raise MalformedInput(
                f'section_modulus {self.section_modulus} does not match '
                f'mom_of_int / (height / 2) = {expected}.'
            )
        for name in self._buckling_terms.get(kind, ()):
            if not getattr(self, name) > 0:
                raise InvalidGeometry(
                    f'{name} has to be greater than zero for {kind.name}.')

    def _number(self, name):
        value = getattr(self, name)
        if value is None:
            raise MissingInput(f'{name} is required.')
        if not isinstance(value, Real) or isinstance(value, bool):
            raise MalformedInput(f'{name} has to be a number.')
        return value

    @classmethod
    def from_vector(cls, values: Sequence[float] | None):
        """Creates the parameters from a flat vector
        ``[H, L, F, Iy, Zy, kind, i_t, lambda, Af]``.

        Raises
        ------
        MissingInput
            If ``values`` is :python:`None`.
        MalformedInput
            If ``values`` is not a one-dimensional numeric sequence with at
            least nine entries.
        InvalidGeometry
            See :any:`SectionParameters`.
        """
        if values is None:
            raise MissingInput('The section parameter vector is missing.')
        try:
            vec = np.asarray(values, dtype=float)
        except (TypeError, ValueError) as e:
            raise MalformedInput(
                'The section parameter vector must be numeric.') from e
        if vec.ndim != 1:
            raise MalformedInput(
                'The section parameter vector must be one-dimensional.')
        if len(vec) < 9:
            raise MalformedInput(
                f'The section parameter vector needs 9 entries, '
                f'got {len(vec)}.')
        h, l_, f, iy, zy, kind, i_t, lam, af = (float(v) for v in vec[:9])
        return cls(h, l_, f, iy, zy, kind, i_t, lam, af)

    @property
    def vector(self) -> tuple:
        """The nine parameters as a flat tuple of floats."""
        return (
            self.height, self.length, self.yield_stress, self.mom_of_int,
            self.section_modulus, float(self.section_kind),
            self.torsional_radius, self.slenderness, self.flange_area
        )

    @property
    def is_recognized(self) -> bool:
        """:python:`True` if :py:attr:`section_kind` is a known rule."""
        return isinstance(self.section_kind, SectionKind)

    def table(self, decimals: int = 3):
        kind = (self.section_kind.name if self.is_recognized
                else f'unrecognized ({self.section_kind})')
        return table_quantities([
            ('Height', 'H', self.height, 'mm'),
            ('Length', 'L', self.length, 'mm'),
            ('Yield stress', 'F', self.yield_stress, 'N/mm^2'),
            ('Second moment of area', 'Iy', self.mom_of_int, 'mm^4'),
            ('Section modulus', 'Zy', self.section_modulus, 'mm^3'),
            ('Section kind', 'kind', kind, ''),
            ('Torsional radius of gyration', 'i_t', self.torsional_radius,
             'mm'),
            ('Slenderness', 'lambda', self.slenderness, ''),
            ('Flange area', 'Af', self.flange_area, 'mm^2'),
        ], decimals=decimals)


class SectionProfile(LoggerMixin, abc.ABC):
    """Base class of the parametrized cross-section builders.

    Subclasses are dataclasses holding the raw dimensions. Validation runs in
    :py:meth:`__post_init__`; the derived :any:`SectionParameters` and the
    2D outline are computed lazily.
    """

    _dimensions: tuple = ()

    def __post_init__(self):
        self.logger.debug(
            "Validating %s dimensions: %s", self.__class__.__name__,
            {name: getattr(self, name) for name in self._dimensions}
        )
        for name in self._dimensions:
            value = getattr(self, name)
            if value is None:
                self.logger.error("Dimension %s is missing.", name)
                raise MissingInput(f'{name} is required.')
            if not isinstance(value, Real) or isinstance(value, bool):
                self.logger.error("Dimension %s is not a number.", name)
                raise MalformedInput(f'{name} has to be a number.')
            if not math.isfinite(value) or value <= 0:
                self.logger.error("Dimension %s = %s is not positive.",
                                  name, value)
                raise InvalidGeometry(f'{name} has to be greater than zero.')
        self._validate()
        params = self.parameters
        self.logger.debug("Section parameters:\n%s", params.table())

    def _validate(self):
        """Family specific checks, called after the positivity checks."""

    @property
    @abc.abstractmethod
    def kind(self) -> SectionKind:
        """Allowable stress rule of the family."""

    @abc.abstractmethod
    def _mom_of_int(self) -> float:
        """Second moment of area about the strong axis."""

    def _torsion_terms(self) -> tuple:
        """``(i_t, lambda, Af)``; zero where the family does not use them."""
        return 0.0, 0.0, 0.0

    @cached_property
    def mom_of_int(self) -> float:
        iy = self._mom_of_int()
        if not iy > 0:
            self.logger.error("Non-positive second moment of area %s.", iy)
            raise InvalidGeometry(
                f'The dimensions give a non-positive second moment of area '
                f'({iy}).'
            )
        return iy

    @cached_property
    def section_modulus(self) -> float:
        return self.mom_of_int / (self.height / 2)

    @cached_property
    def parameters(self) -> SectionParameters:
        """The parameter vector of this section."""
        i_t, lam, af = self._torsion_terms()
        return SectionParameters(
            height=self.height,
            length=self.length,
            yield_stress=self.yield_stress,
            mom_of_int=self.mom_of_int,
            section_modulus=self.section_modulus,
            section_kind=self.kind,
            torsional_radius=i_t,
            slenderness=lam,
            flange_area=af,
        )

    @property
    @abc.abstractmethod
    def outline(self):
        """Plates of the cross-section as a shapely geometry, centred on the
        origin with y horizontal and z vertical."""


class _FlangedShape(SectionProfile):
    """Shared formulas of the H and L shapes.

    Both use the symmetric I-section decomposition for :math:`I_y` and the
    same torsional radius of gyration, whatever the actual plate layout.
    """

    _dimensions = ('width', 'height', 'web_thickness', 'flange_thickness',
                   'yield_stress', 'length')

    def _validate(self):
        num, den = self._torsion_fraction()
        if den == 0:
            self.logger.error(
                "Degenerate thickness combination: i_t denominator is zero."
            )
            raise InvalidGeometry(
                'The thickness combination makes the denominator of the '
                'torsional radius of gyration zero.'
            )
        if num / den < 0:
            self.logger.error("Negative radicand %s in i_t.", num / den)
            raise InvalidGeometry(
                'The thickness combination gives a negative radicand in the '
                'torsional radius of gyration.'
            )

    def _mom_of_int(self) -> float:
        b, h = self.width, self.height
        tw, tf = self.web_thickness, self.flange_thickness
        return (1.0 / 12.0 * b * h ** 3
                - 1.0 / 12.0 * (b - tw) * (h - 2 * tf) ** 3)

    def _torsion_fraction(self) -> tuple:
        # Compression flange plus one sixth of the web depth.
        b, h = self.width, self.height
        tw, tf = self.web_thickness, self.flange_thickness
        num = tf * b ** 3 + (h / 6.0 - tf) * tw ** 3
        den = 12 * (tf * b + (h / 6.0 - tf) * tw)
        return num, den

    @cached_property
    def torsional_radius(self) -> float:
        num, den = self._torsion_fraction()
        return math.sqrt(num / den)

    @cached_property
    def slenderness(self) -> float:
        return defaults.SLENDERNESS_CONST / math.sqrt(
            self.yield_stress / defaults.SAFETY_FACTOR
        )

    @cached_property
    def flange_area(self) -> float:
        return self.width * self.flange_thickness

    def _torsion_terms(self) -> tuple:
        return self.torsional_radius, self.slenderness, self.flange_area


@dataclass(eq=False)
class HShape(_FlangedShape):
    """H/I shape bent about its strong axis.

    Parameters
    ----------
    width : :any:`float`
        Flange width :math:`B` in mm.
    height : :any:`float`
        Overall depth :math:`H` in mm.
    web_thickness : :any:`float`
        Web thickness :math:`t_w` in mm.
    flange_thickness : :any:`float`
        Flange thickness :math:`t_f` in mm.
    yield_stress : :any:`float`
        Reference yield stress :math:`F` in N/mm².
    length : :any:`float`
        Member length :math:`L` in mm.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    MissingInput
        If a dimension is :python:`None`.
    InvalidGeometry
        If a dimension is not positive or the torsional radius of gyration
        cannot be computed.

    Examples
    --------
    >>> section = HShape(200, 400, 8, 13, 235, 6300)
    >>> round(section.parameters.section_modulus, 1)
    1148243.4
    """

    width: float
    height: float
    web_thickness: float
    flange_thickness: float
    yield_stress: float
    length: float
    debug: bool = False

    @property
    def kind(self):
        return SectionKind.H_STRONG_AXIS

    @cached_property
    def outline(self):
        b, h = self.width, self.height
        tw, tf = self.web_thickness, self.flange_thickness
        return unary_union([
            box(-b / 2, h / 2 - tf, b / 2, h / 2),
            box(-b / 2, -h / 2, b / 2, -h / 2 + tf),
            box(-tw / 2, -h / 2 + tf, tw / 2, h / 2 - tf),
        ])


@dataclass(eq=False)
class LShape(_FlangedShape):
    """L shape: one flange at the bottom, one web at the left edge.

    Takes the same dimensions as :any:`HShape` and uses its formulas
    unchanged; only the allowable stress rule differs.
    """

    width: float
    height: float
    web_thickness: float
    flange_thickness: float
    yield_stress: float
    length: float
    debug: bool = False

    @property
    def kind(self):
        return SectionKind.L_SHAPE_ASYMMETRIC

    @cached_property
    def outline(self):
        b, h = self.width, self.height
        tw, tf = self.web_thickness, self.flange_thickness
        return unary_union([
            box(-b / 2, -h / 2, b / 2, -h / 2 + tf),
            box(-b / 2, -h / 2 + tf, -b / 2 + tw, h / 2),
        ])


@dataclass(eq=False)
class BoxShape(SectionProfile):
    """Box section with uniform wall thickness.

    Round hollow sections are modelled by the equivalent box.

    Parameters
    ----------
    width : :any:`float`
        Outer width :math:`B` in mm.
    height : :any:`float`
        Outer depth :math:`H` in mm.
    thickness : :any:`float`
        Wall thickness :math:`t` in mm.
    yield_stress : :any:`float`
        Reference yield stress :math:`F` in N/mm².
    length : :any:`float`
        Member length :math:`L` in mm.
    debug : :any:`bool`, default=False
        Enables debug logging.
    """

    width: float
    height: float
    thickness: float
    yield_stress: float
    length: float
    debug: bool = False

    _dimensions = ('width', 'height', 'thickness', 'yield_stress', 'length')

    @property
    def kind(self):
        return SectionKind.BOX_OR_ROUND

    def _validate(self):
        if self.thickness >= min(self.width, self.height):
            self.logger.error(
                "Wall thickness %s exceeds the outer dimensions.",
                self.thickness
            )
            raise InvalidGeometry(
                'thickness has to be less than width and height.'
            )

    def _mom_of_int(self) -> float:
        b, h, t = self.width, self.height, self.thickness
        return 1.0 / 12.0 * (b * h ** 3 - (b - t) * (h - t) ** 3)

    @cached_property
    def outline(self):
        b, h, t = self.width, self.height, self.thickness
        outer = box(-b / 2, -h / 2, b / 2, h / 2)
        if 2 * t >= min(b, h):
            return outer
        return outer.difference(box(-b / 2 + t, -h / 2 + t,
                                    b / 2 - t, h / 2 - t))


_BUILDERS = {
    SectionFamily.H: HShape,
    SectionFamily.L: LShape,
    SectionFamily.BOX: BoxShape,
    SectionFamily.ROUND: BoxShape,
}


def section_profile(family, geometry: Mapping[str, float] | None,
                    debug: bool = False) -> SectionProfile:
    """Creates the builder of ``family`` from a mapping of dimensions.

    Raises
    ------
    InvalidGeometry
        If ``family`` is unknown or a dimension is invalid.
    MissingInput
        If ``geometry`` is :python:`None` or lacks a dimension.
    """
    try:
        family = SectionFamily(
            family.lower() if isinstance(family, str) else family
        )
    except ValueError as e:
        raise InvalidGeometry(f'Unknown section family {family!r}.') from e
    if geometry is None:
        raise MissingInput('The section geometry is missing.')
    cls = _BUILDERS[family]
    missing = [n for n in cls._dimensions if n not in geometry]
    if missing:
        raise MissingInput(
            f'Missing dimensions for {family.name} section: '
            f'{", ".join(missing)}.'
        )
    unknown = set(geometry) - set(cls._dimensions)
    if unknown:
        raise MalformedInput(
            f'Unknown dimensions for {family.name} section: '
            f'{", ".join(sorted(unknown))}.'
        )
    return cls(**geometry, debug=debug)


def build_section(family, geometry: Mapping[str, float] | None,
                  debug: bool = False) -> SectionParameters:
    """Derives the :any:`SectionParameters` of a cross-section.

    Parameters
    ----------
    family : {'h', 'l', 'box', 'round'} or :any:`SectionFamily`
        Cross-section family.
    geometry : :any:`dict`
        Dimensions keyed by the field names of the family's builder
        (:any:`HShape`, :any:`LShape` or :any:`BoxShape`).
    debug : :any:`bool`, default=False
        Enables debug logging of the builder.

    Examples
    --------
    >>> p = build_section('box', dict(width=150, height=150, thickness=6,
    ...                               yield_stress=235, length=3200))
    >>> p.section_kind
    <SectionKind.BOX_OR_ROUND: 1>
    """
    return section_profile(family, geometry, debug=debug).parameters
