
from sbeam.core import (
    allowable_stress, AllowableStress, AnalysisResult, AppliedMoment,
    BoxShape, build_section, CantileverPointLoad, CentralPointLoad, evaluate,
    HShape, InvalidGeometry, LoadCaseKind, LShape, MalformedInput,
    MissingInput, MomentDiagram, plot_cross_section, plot_moment_diagram,
    SBeamError, SectionFamily, SectionKind, SectionParameters, TrapezoidLoad
)

__all__ = [
    'allowable_stress',
    'AllowableStress',
    'AnalysisResult',
    'AppliedMoment',
    'BoxShape',
    'build_section',
    'CantileverPointLoad',
    'CentralPointLoad',
    'evaluate',
    'HShape',
    'InvalidGeometry',
    'LoadCaseKind',
    'LShape',
    'MalformedInput',
    'MissingInput',
    'MomentDiagram',
    'plot_cross_section',
    'plot_moment_diagram',
    'SBeamError',
    'SectionFamily',
    'SectionKind',
    'SectionParameters',
    'TrapezoidLoad',
]
