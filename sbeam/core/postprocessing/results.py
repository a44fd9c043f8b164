import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from sbeam.core import defaults
from sbeam.core.exceptions import MalformedInput, MissingInput
from sbeam.core.logger_mixin import table_diagram, table_quantities


@dataclass(frozen=True)
class MomentDiagram:
    """Bending moment sampled at the quarter points of the span.

    Parameters
    ----------
    samples : :any:`tuple` of :any:`float`
        Moments in kNm at the span fractions 0, 1/4, 1/2, 3/4 and 1.
    span : :any:`float`
        Span length :math:`L` in mm.

    Raises
    ------
    MalformedInput
        If there are not exactly five samples.
    """

    samples: tuple
    span: float

    def __post_init__(self):
        samples = tuple(float(m) for m in self.samples)
        if len(samples) != len(defaults.SPAN_FRACTIONS):
            raise MalformedInput(
                f'A moment diagram has {len(defaults.SPAN_FRACTIONS)} '
                f'samples, got {len(samples)}.'
            )
        object.__setattr__(self, 'samples', samples)
        object.__setattr__(self, 'span', float(self.span))

    @classmethod
    def from_values(cls, values: Sequence[float] | None):
        """Inverse of :py:attr:`values`.

        Raises
        ------
        MissingInput
            If ``values`` is :python:`None`.
        MalformedInput
            If ``values`` does not hold exactly six numbers.
        """
        if values is None:
            raise MissingInput('The moment diagram is missing.')
        values = list(values)
        if len(values) != len(defaults.SPAN_FRACTIONS) + 1:
            raise MalformedInput(
                f'A moment diagram needs {len(defaults.SPAN_FRACTIONS) + 1} '
                f'values, got {len(values)}.'
            )
        return cls(tuple(values[:-1]), values[-1])

    @property
    def values(self) -> tuple:
        """The five samples followed by the span, the format expected by
        viewers of the diagram."""
        return self.samples + (self.span,)

    @property
    def stations(self) -> np.ndarray:
        """x coordinates of the samples in mm."""
        return self.span * np.array(defaults.SPAN_FRACTIONS)

    @property
    def moments(self) -> np.ndarray:
        return np.array(self.samples)

    @property
    def max_abs(self) -> float:
        """Largest absolute sampled moment in kNm."""
        return float(np.max(np.abs(self.moments)))

    def table(self, decimals: int = 3):
        return table_diagram(self.stations, self.samples, decimals)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one load case evaluation.

    Parameters
    ----------
    load_case : :any:`LoadCaseKind`
        Evaluated load case.
    diagram : :any:`MomentDiagram`
        Sampled bending moment.
    moment : :any:`float`
        Governing moment :math:`M` in kNm.
    stress : :any:`float`
        Peak bending stress :math:`\\sigma` in N/mm².
    allowable_stress : :any:`float`
        Allowable bending stress :math:`f_b` in N/mm². Zero flags an
        unrecognized section kind.
    ratio : :any:`float`
        :math:`\\sigma / f_b`; infinite if :math:`f_b = 0`.
    deflection : :any:`float`
        Deflection :math:`D` in mm.
    """

    load_case: object
    diagram: MomentDiagram
    moment: float
    stress: float
    allowable_stress: float
    ratio: float
    deflection: float

    @staticmethod
    def check_ratio(stress: float, allowable: float) -> float:
        """:math:`\\sigma / f_b` with IEEE semantics: a zero allowable stress
        gives :math:`\\pm\\infty` (or NaN for a zero stress) instead of
        raising."""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(stress) / np.float64(allowable))

    @property
    def passed(self) -> bool:
        """:python:`True` if :math:`|\\sigma / f_b| \\le 1`."""
        return not math.isnan(self.ratio) and abs(self.ratio) <= 1.0

    def summary(self, decimals: int = 3) -> str:
        """Input/result table of the check as plain text."""
        name = getattr(self.load_case, 'name', str(self.load_case))
        return table_quantities([
            ('Load case', '', name, ''),
            ('Span', 'L', self.diagram.span, 'mm'),
            ('Bending moment', 'M', self.moment, 'kNm'),
            ('Bending stress', 'Sig', self.stress, 'N/mm^2'),
            ('Allowable bending stress', 'fb', self.allowable_stress,
             'N/mm^2'),
            ('Check ratio', 'Sig/fb', self.ratio, ''),
            ('Deflection', 'D', self.deflection, 'mm'),
            ('Result', '', 'OK' if self.passed else 'NG', ''),
        ], decimals=decimals)
