from dataclasses import dataclass
from functools import cached_property

import numpy as np

from sbeam.core import defaults
from sbeam.core.logger_mixin import LoggerMixin
from sbeam.core.preprocessing.cross_section import (
    SectionKind, SectionParameters
)


@dataclass(eq=False)
class AllowableStress(LoggerMixin):
    r"""Allowable bending stress :math:`f_b` of a member.

    The rule is selected by :py:attr:`SectionParameters.section_kind`:

    * :any:`SectionKind.H_STRONG_AXIS`

      .. math ::
        f_{b1} = \left(1 - 0.4 \frac{(L_b / i_t)^2}{C \Lambda^2}\right)
        \frac{F}{1.5}, \quad
        f_{b2} = \frac{89000}{L_b H / A_f}, \quad
        f_b = \min\left(\max(f_{b1}, f_{b2}), \frac{F}{1.5}\right)

    * :any:`SectionKind.BOX_OR_ROUND`: :math:`f_b = F / 1.5`
    * :any:`SectionKind.L_SHAPE_ASYMMETRIC`:
      :math:`f_b = \min(f_{b2}, F / 1.5)`
    * anything else: :math:`f_b = 0`, so that the check ratio becomes
      infinite.

    The arithmetic is done in IEEE floating point: :math:`L_b = 0` gives
    :math:`f_{b2} = \infty` and thus the unreduced value :math:`F / 1.5`.

    Parameters
    ----------
    parameters : :any:`SectionParameters`
        Section and member properties.
    buckling_length : :any:`float`, default=0.0
        Unsupported length :math:`L_b` in mm.
    bending_coef : :any:`float`, default=1.0
        Bending coefficient :math:`C`.
    debug : :any:`bool`, default=False
        Enables debug logging.
    """

    parameters: SectionParameters
    buckling_length: float = defaults.BUCKLING_LENGTH
    bending_coef: float = defaults.BENDING_COEF
    debug: bool = False

    def __post_init__(self):
        self.logger.debug(
            "Allowable stress for kind=%r, Lb=%s, C=%s",
            self.parameters.section_kind, self.buckling_length,
            self.bending_coef
        )

    @cached_property
    def cap(self) -> np.float64:
        """Unreduced allowable stress :math:`F / 1.5`."""
        return np.float64(self.parameters.yield_stress) / \
            defaults.SAFETY_FACTOR

    @cached_property
    def lateral_buckling(self) -> np.float64:
        """:math:`f_{b1}`, reduction by the slenderness :math:`L_b / i_t`."""
        p = self.parameters
        lb = np.float64(self.buckling_length)
        with np.errstate(divide='ignore', invalid='ignore'):
            ratio = (lb / p.torsional_radius) ** 2
            return (1.0 - defaults.BUCKLING_REDUCTION * ratio
                    / (self.bending_coef * p.slenderness ** 2)) * self.cap

    @cached_property
    def flange_buckling(self) -> np.float64:
        """:math:`f_{b2}`, compression flange rule."""
        p = self.parameters
        lb = np.float64(self.buckling_length)
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.float64(defaults.FLANGE_BUCKLING_CONST) / (
                lb * p.height / p.flange_area
            )

    @cached_property
    def value(self) -> float:
        kind = self.parameters.section_kind
        if kind is SectionKind.H_STRONG_AXIS:
            fb = np.minimum(
                np.maximum(self.lateral_buckling, self.flange_buckling),
                self.cap
            )
        elif kind is SectionKind.BOX_OR_ROUND:
            fb = self.cap
        elif kind is SectionKind.L_SHAPE_ASYMMETRIC:
            fb = np.minimum(self.flange_buckling, self.cap)
        else:
            self.logger.warning(
                "Unrecognized section kind %r: allowable stress set to 0.",
                kind
            )
            fb = 0.0
        self.logger.debug("fb = %s", fb)
        return float(fb)


def allowable_stress(parameters: SectionParameters,
                     buckling_length: float = defaults.BUCKLING_LENGTH,
                     bending_coef: float = defaults.BENDING_COEF,
                     debug: bool = False) -> float:
    """Allowable bending stress in N/mm², see :any:`AllowableStress`.

    Never raises for an unrecognized section kind; returns ``0.0`` instead.

    Examples
    --------
    >>> from sbeam.core.preprocessing import HShape
    >>> p = HShape(200, 400, 8, 13, 235, 6300).parameters
    >>> allowable_stress(p, 0.0) == 235 / 1.5
    True
    """
    return AllowableStress(
        parameters, buckling_length, bending_coef, debug=debug
    ).value
