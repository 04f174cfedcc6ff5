from __future__ import annotations

from typing import Optional

from .jobcontroller import JobController
from .model import JobResult


def submit(docx_path: str, project_root: str, layout_path: Optional[str] = None) -> JobResult:
    """Public API (JobController)

    Contract:
    - job_id = sha256(file_bytes)[:16]
    - lock file under locks/<job_id>.lock (create-exclusive)
    - state file under jobs/<job_id>.json
    - layout: layout_path, else rules/layout.json if present, else defaults
    - serial pipeline: extractor -> writer
    """
    return JobController().submit(docx_path, project_root, layout_path)
