# Units: mm, kN, kN*m and N/mm^2 throughout.

# -- Material -----------------------------------------------------------------
YOUNG_MOD = 205000.0

# -- Allowable bending stress -------------------------------------------------
SAFETY_FACTOR = 1.5
BENDING_COEF = 1.0
BUCKLING_LENGTH = 0.0
BUCKLING_REDUCTION = 0.4
FLANGE_BUCKLING_CONST = 89000.0
SLENDERNESS_CONST = 1500.0

# -- Unit conversion ----------------------------------------------------------
KN_M_TO_N_MM = 1e6
KN_TO_N = 1000.0
MM_PER_M = 1000.0

# -- Section panel defaults ---------------------------------------------------
H_SHAPE_DEFAULTS = dict(
    width=200.0, height=400.0, web_thickness=8.0, flange_thickness=13.0,
    yield_stress=235.0, length=6300.0
)
L_SHAPE_DEFAULTS = dict(
    width=75.0, height=75.0, web_thickness=9.0, flange_thickness=9.0,
    yield_stress=235.0, length=3000.0
)
BOX_SHAPE_DEFAULTS = dict(
    width=150.0, height=150.0, thickness=6.0, yield_stress=235.0,
    length=3200.0
)

# -- Load panel defaults ------------------------------------------------------
POINT_LOAD = 100.0
TRAPEZOID_LOAD = 10.0
TRAPEZOID_WIDTH = 1800.0

# -- Moment diagram -----------------------------------------------------------
SPAN_FRACTIONS = (0.0, 0.25, 0.5, 0.75, 1.0)
DIAGRAM_SCALE = 10.0
DIAGRAM_COLOR = 'skyblue'
SECTION_COLOR = 'lightcoral'
TEXT_COLOR = 'black'
