from sbeam.core.calc_methods.allowable_stress import (
    allowable_stress, AllowableStress
)
from sbeam.core.calc_methods.load_case import (
    AppliedMomentCase, CantileverPointLoadCase, CentralPointLoadCase,
    evaluate, load_case, LOAD_CASES, LoadCase, TrapezoidLoadCase
)

__all__ = [
    'allowable_stress',
    'AllowableStress',
    'AppliedMomentCase',
    'CantileverPointLoadCase',
    'CentralPointLoadCase',
    'evaluate',
    'load_case',
    'LOAD_CASES',
    'LoadCase',
    'TrapezoidLoadCase',
]
