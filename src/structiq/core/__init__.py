# Core calculation engine
from .beam_analysis import BeamAnalyzer
from .deflection import DeflectionCalculator
from .seismic import SeismicLoadCalculator
from .slab import SlabDesigner
from .code_check import DesignCodeChecker
from .units import StressUnit, UnitValue, convert, list_units, parse_unit
