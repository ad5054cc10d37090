"""streamwire - Submission (core).

Decisão do chamador sobre um ValidationResult:
 - SubmissionContext → eventos estruturados e warnings por componente
 - check_submission  → aplica a ValidationPolicy (rejeitar / avisar)
 - SubmissionReport  → resultado aceito, imutável
"""

from .context import TOPOLOGY_SCOPE, SubmissionContext  # noqa: F401
from .gate import SubmissionReport, check_submission  # noqa: F401
