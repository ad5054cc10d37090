"""streamwire - Validation (core).

Verificação pura e sem efeitos colaterais da fiação de uma topologia:
 - detecção de topologia esqueleto
 - coleta de entradas e saídas declaradas
 - diferença entre entradas e saídas (ValidationResult)
 - formatação de diagnósticos
"""

from .formatting import component_streams_to_string, format_validation_result  # noqa: F401
from .result import ValidationResult  # noqa: F401
from .validator import (  # noqa: F401
    get_all_component_inputs,
    get_all_component_outputs,
    is_skeleton_topology,
    validate_topology,
)
