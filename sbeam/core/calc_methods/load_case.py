import abc
from dataclasses import dataclass
from functools import cached_property
from typing import Mapping

from sbeam.core import defaults
from sbeam.core.calc_methods.allowable_stress import AllowableStress
from sbeam.core.exceptions import MalformedInput, MissingInput
from sbeam.core.logger_mixin import LoggerMixin
from sbeam.core.postprocessing.results import AnalysisResult, MomentDiagram
from sbeam.core.preprocessing.cross_section import SectionParameters
from sbeam.core.preprocessing.loads import (
    AppliedMoment, CantileverPointLoad, CentralPointLoad,
    LoadCaseKind, LoadInput, TrapezoidLoad
)


@dataclass(eq=False)
class LoadCase(LoggerMixin, abc.ABC):
    r"""First-order statics of one member under one load case.

    Subclasses provide the governing moment, the sampled moment diagram and
    the deflection; the stress check is shared:

    .. math ::
        \sigma = \frac{M \cdot 10^6}{Z_y}, \quad
        \text{ratio} = \frac{\sigma}{f_b}

    with :math:`f_b` from :any:`AllowableStress` (:math:`C = 1`).

    Instances only hold their inputs; every result is derived from them, so
    repeated evaluation gives identical values.
    """

    load_type = LoadInput

    def __post_init__(self):
        if self.parameters is None:
            self.logger.error("Section parameters are missing.")
            raise MissingInput('The section parameters are missing.')
        if not isinstance(self.parameters, SectionParameters):
            self.parameters = SectionParameters.from_vector(self.parameters)
        if self.load is None:
            self.logger.error("Load inputs are missing.")
            raise MissingInput('The load inputs are missing.')
        if isinstance(self.load, Mapping):
            self.load = self.load_type.from_mapping(self.load)
        if not isinstance(self.load, self.load_type):
            self.logger.error(
                "%s expects %s, got %s.", type(self).__name__,
                self.load_type.__name__, type(self.load).__name__
            )
            raise MalformedInput(
                f'{type(self).__name__} expects a '
                f'{self.load_type.__name__}, got {type(self.load).__name__}.'
            )
        self.logger.debug(
            "%s with %s on\n%s", type(self).__name__, self.load,
            self.parameters.table()
        )

    @property
    def kind(self) -> LoadCaseKind:
        return self.load_type.kind

    @property
    def span(self) -> float:
        return self.parameters.length

    @property
    @abc.abstractmethod
    def moment(self) -> float:
        """Governing bending moment :math:`M` in kNm."""

    @abc.abstractmethod
    def _samples(self) -> tuple:
        """Moments at the span fractions 0, 1/4, 1/2, 3/4, 1 in kNm."""

    @property
    @abc.abstractmethod
    def deflection(self) -> float:
        """Deflection :math:`D` in mm."""

    @cached_property
    def diagram(self) -> MomentDiagram:
        diagram = MomentDiagram(self._samples(), self.span)
        self.logger.debug("Moment diagram:\n%s", diagram.table())
        return diagram

    @cached_property
    def stress(self) -> float:
        """Peak bending stress :math:`\\sigma` in N/mm²."""
        return (self.moment * defaults.KN_M_TO_N_MM
                / self.parameters.section_modulus)

    @cached_property
    def allowable_stress(self) -> float:
        return AllowableStress(
            self.parameters, self.load.buckling_length,
            defaults.BENDING_COEF, debug=self.debug
        ).value

    @cached_property
    def ratio(self) -> float:
        return AnalysisResult.check_ratio(self.stress, self.allowable_stress)

    @cached_property
    def result(self) -> AnalysisResult:
        result = AnalysisResult(
            load_case=self.kind,
            diagram=self.diagram,
            moment=self.moment,
            stress=self.stress,
            allowable_stress=self.allowable_stress,
            ratio=self.ratio,
            deflection=self.deflection,
        )
        self.logger.info(
            "%s: Sig = %.3f N/mm^2, fb = %.3f N/mm^2, Sig/fb = %.3f, "
            "D = %.3f mm", self.kind.name, result.stress,
            result.allowable_stress, result.ratio, result.deflection
        )
        self.logger.debug("Result:\n%s", result.summary())
        return result


@dataclass(eq=False)
class CentralPointLoadCase(LoadCase):
    r"""Simply supported member with a point load :math:`P` at midspan.

    .. math ::
        M = \frac{P L}{4}, \quad
        D = \frac{P L^3}{48 E I_y}
    """

    parameters: SectionParameters
    load: CentralPointLoad
    debug: bool = False

    load_type = CentralPointLoad

    @cached_property
    def moment(self):
        return self.load.load * (self.span / defaults.MM_PER_M) / 4

    def _samples(self):
        m = self.moment
        return 0.0, m / 2, m, m / 2, 0.0

    @cached_property
    def deflection(self):
        return (self.load.load * defaults.KN_TO_N * self.span ** 3
                / (48 * self.load.young_mod * self.parameters.mom_of_int))


@dataclass(eq=False)
class TrapezoidLoadCase(LoadCase):
    r"""Simply supported member under a trapezoidal line load.

    With the peak line load :math:`q = W D_W / 1000` (N/mm):

    .. math ::
        M = \frac{q}{24} (3 L^2 - 4 D_W^2) \cdot 10^{-6}, \quad
        D = \frac{q}{1920 E I_y} (5 L^2 - 4 D_W^2)^2

    and the quarter point moment

    .. math ::
        R_a = \frac{q (L - D_W)}{2}, \quad
        M_x = \left(\frac{R_a L}{4} - \frac{q (L/4)^3}{6 D_W}\right)
        \cdot 10^{-6}
    """

    parameters: SectionParameters
    load: TrapezoidLoad
    debug: bool = False

    load_type = TrapezoidLoad

    def __post_init__(self):
        super().__post_init__()
        if 2 * self.load.width > self.span:
            self.logger.warning(
                "Dominating width %s mm exceeds half the span %s mm; the "
                "load is no longer trapezoidal.", self.load.width, self.span
            )

    @cached_property
    def reaction(self) -> float:
        """Support reaction :math:`R_a` in N."""
        return self.load.line_load * (self.span - self.load.width) / 2

    @cached_property
    def moment(self):
        q, l_, dw = self.load.line_load, self.span, self.load.width
        return q / 24 * (3 * l_ ** 2 - 4 * dw ** 2) / defaults.KN_M_TO_N_MM

    @cached_property
    def quarter_moment(self) -> float:
        """Moment :math:`M_x` at the quarter points in kNm."""
        q, l_, dw = self.load.line_load, self.span, self.load.width
        return (self.reaction * l_ / 4
                - q * (l_ / 4) ** 3 / (6 * dw)) / defaults.KN_M_TO_N_MM

    def _samples(self):
        mx = self.quarter_moment
        return 0.0, mx, self.moment, mx, 0.0

    @cached_property
    def deflection(self):
        q, l_, dw = self.load.line_load, self.span, self.load.width
        return (q / (1920 * self.load.young_mod * self.parameters.mom_of_int)
                * (5 * l_ ** 2 - 4 * dw ** 2) ** 2)


@dataclass(eq=False)
class CantileverPointLoadCase(LoadCase):
    r"""Cantilever with a point load :math:`P` at its free tip.

    The moment is hogging: :math:`-M` at the fixed end, zero at the tip.

    .. math ::
        M = P L, \quad
        D = \frac{(P / 1000) L^3}{3 E I_y}
    """

    parameters: SectionParameters
    load: CantileverPointLoad
    debug: bool = False

    load_type = CantileverPointLoad

    @cached_property
    def moment(self):
        return self.load.load * self.span / defaults.MM_PER_M

    def _samples(self):
        m = self.moment
        return -m, -m * 3 / 4, -m / 2, -m / 4, 0.0

    @cached_property
    def deflection(self):
        return (self.load.load / 1000 * self.span ** 3
                / (3.0 * self.load.young_mod * self.parameters.mom_of_int))


@dataclass(eq=False)
class AppliedMomentCase(LoadCase):
    """Member under a given moment, e.g. from a connection design.

    The moment is constant along the member and no deflection is computed.
    """

    parameters: SectionParameters
    load: AppliedMoment
    debug: bool = False

    load_type = AppliedMoment

    @cached_property
    def moment(self):
        return float(self.load.moment)

    def _samples(self):
        return (self.moment,) * len(defaults.SPAN_FRACTIONS)

    @cached_property
    def deflection(self):
        return 0.0


LOAD_CASES = {
    case.load_type.kind: case
    for case in (CentralPointLoadCase, TrapezoidLoadCase,
                 CantileverPointLoadCase, AppliedMomentCase)
}


def load_case(kind, parameters, load_inputs, debug: bool = False):
    """Creates the :any:`LoadCase` of ``kind``.

    Raises
    ------
    MissingInput
        If ``kind``, ``parameters`` or ``load_inputs`` is missing.
    MalformedInput
        If ``kind`` is unknown, the parameter vector is malformed or
        ``load_inputs`` belongs to another load case.
    """
    kind = LoadCaseKind.parse(kind)
    if isinstance(load_inputs, LoadInput) and load_inputs.kind is not kind:
        raise MalformedInput(
            f'Load inputs of type {type(load_inputs).__name__} do not match '
            f'the load case {kind.value!r}.'
        )
    return LOAD_CASES[kind](parameters, load_inputs, debug=debug)


def evaluate(kind, parameters, load_inputs,
             debug: bool = False) -> AnalysisResult:
    """Evaluates one load case.

    Parameters
    ----------
    kind : :any:`LoadCaseKind` or :any:`str`
        ``'central'``, ``'trapezoid'``, ``'cantilever'`` or ``'moment'``.
    parameters : :any:`SectionParameters` or sequence of :any:`float`
        Section parameters, or the flat nine-value vector.
    load_inputs : :any:`LoadInput` or :any:`dict`
        Load of the matching type, or a mapping of its field names.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Returns
    -------
    :any:`AnalysisResult`

    Examples
    --------
    >>> from sbeam.core.preprocessing import HShape
    >>> p = HShape(200, 400, 8, 13, 235, 6300).parameters
    >>> evaluate('central', p, {'load': 100}).moment
    157.5
    """
    return load_case(kind, parameters, load_inputs, debug=debug).result
