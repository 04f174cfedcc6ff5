from dataclasses import dataclass
from typing import Dict

@dataclass(frozen=True)
class JobResult:
    job_id: str
    docx_path: str
    status: str  # DONE|FAILED|SKIPPED
    details: Dict[str, object]
