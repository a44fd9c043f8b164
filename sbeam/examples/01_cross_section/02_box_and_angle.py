"""
Example 02:
Box and angle sections from a dictionary of dimensions

:any:`build_section` selects the builder by family name. The box family
also covers round hollow sections; the angle uses the H shape formulas but
its own allowable stress rule.
"""

from sbeam.core import defaults
from sbeam.core.preprocessing import build_section

for family, geometry in (('box', defaults.BOX_SHAPE_DEFAULTS),
                         ('l', defaults.L_SHAPE_DEFAULTS)):
    p = build_section(family, geometry)
    print(f"=== {family.upper()} section ({p.section_kind.name}) ===")
    print(p.table())
    print("Flat vector:", p.vector)
