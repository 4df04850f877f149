# Design code provisions
from types import MappingProxyType

from structiq.models.inputs import CodeStandard

from .base_code import DesignCode, CodeReferences
from .aci318 import ACI318
from .eurocode2 import Eurocode2
from .is456 import IS456

DESIGN_CODES = MappingProxyType({
    CodeStandard.ACI: ACI318(),
    CodeStandard.EUROCODE: Eurocode2(),
    CodeStandard.IS: IS456(),
})


def get_design_code(standard: CodeStandard) -> DesignCode:
    """Return the provisions object for a code standard."""
    return DESIGN_CODES[CodeStandard(standard)]
