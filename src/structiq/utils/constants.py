"""
Engineering constants shared by the calculators.
"""

# Sampling resolution of the result curves
BEAM_ANALYSIS_INTERVALS = 50
CURVE_INTERVALS = 20

# Unit scaling
GPA_TO_PA = 1e9
M_TO_MM = 1000.0
KNM_TO_NMM = 1e6

# Reinforcing steel yield strength (MPa), fixed for slab and code checks
STEEL_YIELD_STRENGTH = 500.0

# Concrete strength assumed by the simplified moment-capacity check (MPa)
CODE_CHECK_CONCRETE_STRENGTH = 25.0

# Modulus of elasticity of concrete used for slab deflection shapes (MPa)
SLAB_CONCRETE_MODULUS = 25000.0

# Design strip width for slabs (mm)
SLAB_STRIP_WIDTH = 1000.0

# Upper bound on bar spacing in slabs (mm)
MAX_BAR_SPACING = 250.0

# Deflection limit denominators (span / n)
DEFLECTION_LIMITS = (250, 360, 480)
DEFAULT_DEFLECTION_LIMIT = 250

# Spectrum curve sampling (s)
SPECTRUM_MAX_PERIOD = 4.0
SPECTRUM_PERIOD_STEP = 0.1
