
from sbeam.core.preprocessing.cross_section import (
    BoxShape,
    build_section,
    HShape,
    LShape,
    section_profile,
    SectionFamily,
    SectionKind,
    SectionParameters,
    SectionProfile,
)
from sbeam.core.preprocessing.loads import (
    AppliedMoment,
    CantileverPointLoad,
    CentralPointLoad,
    LOAD_TYPES,
    LoadCaseKind,
    LoadInput,
    TrapezoidLoad,
)


__all__ = [
    'AppliedMoment',
    'BoxShape',
    'build_section',
    'CantileverPointLoad',
    'CentralPointLoad',
    'HShape',
    'LOAD_TYPES',
    'LoadCaseKind',
    'LoadInput',
    'LShape',
    'section_profile',
    'SectionFamily',
    'SectionKind',
    'SectionParameters',
    'SectionProfile',
    'TrapezoidLoad',
]
