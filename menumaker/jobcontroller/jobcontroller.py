from __future__ import annotations

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .model import JobResult

logger = logging.getLogger(__name__)


class JobController:
    def submit(self, docx_path: str, project_root: str, layout_path: Optional[str] = None) -> JobResult:
        root = Path(project_root)
        document = Path(docx_path)

        if not document.exists():
            return self._result("FAILED", "", str(document), {"error": "docx_not_found"})

        job_id = self._hash_file(document)
        locks_dir = root / "locks"
        jobs_dir = root / "jobs"
        output_dir = root / "output" / "final"
        locks_dir.mkdir(parents=True, exist_ok=True)
        jobs_dir.mkdir(parents=True, exist_ok=True)

        if layout_path is None:
            default_rules = root / "rules" / "layout.json"
            layout_path = str(default_rules) if default_rules.exists() else None

        lock_path = locks_dir / f"{job_id}.lock"
        state_path = jobs_dir / f"{job_id}.json"

        # Idempotency: if DONE exists, skip
        if state_path.exists():
            try:
                state = json.loads(state_path.read_text(encoding="utf-8"))
            except ValueError:
                state = {}
            if state.get("status") == "DONE":
                return self._result("SKIPPED", job_id, str(document), {"reason": "already_done"})

        try:
            self._acquire_lock(lock_path)
        except FileExistsError:
            return self._result("SKIPPED", job_id, str(document), {"reason": "locked"})

        state: Dict[str, Any] = {"job_id": job_id, "docx_path": str(document), "status": "LOCKED", "steps": []}
        self._save_state(state_path, state)
        logger.info("job %s: importing %s", job_id, document.name)

        try:
            from menumaker.extractor.api import parse
            from menumaker.layout.api import resolve_layout
            from menumaker.writer.api import write_recipe

            # PARSE
            layout = resolve_layout(layout_path)
            record = parse(document.read_bytes(), layout)
            state["status"] = "PARSED"
            state["steps"].append({
                "step": "extractor",
                "layout_path": layout_path,
                "recipe": record.name,
                "ingredients": len(record.ingredients),
            })
            self._save_state(state_path, state)

            # WRITE
            wr = write_recipe(record, str(output_dir))
            write = {"excel_path": wr.excel_path, "sheet": wr.sheet_name, "status": wr.status}
            state["status"] = "WRITTEN"
            state["steps"].append({"step": "writer", **write})
            self._save_state(state_path, state)

            state["status"] = "DONE"
            state["recipe"] = record.to_dict()
            self._save_state(state_path, state)
            logger.info("job %s: done (%s)", job_id, wr.status)
            return self._result("DONE", job_id, str(document), {"recipe": record.name, "write": write})

        except Exception as e:
            logger.warning("job %s: failed: %s", job_id, e)
            state["status"] = "FAILED"
            state["error"] = str(e)
            self._save_state(state_path, state)
            return self._result("FAILED", job_id, str(document), {"error": str(e)})
        finally:
            self._release_lock(lock_path)

    def _hash_file(self, path: Path) -> str:
        h = hashlib.sha256()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(1024 * 1024), b""):
                h.update(chunk)
        return h.hexdigest()[:16]

    def _acquire_lock(self, lock_path: Path) -> None:
        fd = os.open(str(lock_path), os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        os.close(fd)

    def _release_lock(self, lock_path: Path) -> None:
        lock_path.unlink(missing_ok=True)

    def _save_state(self, path: Path, state: Dict[str, Any]) -> None:
        path.write_text(json.dumps(state, indent=2, ensure_ascii=False), encoding="utf-8")

    def _result(self, status: str, job_id: str, docx_path: str, details: Dict[str, object]) -> JobResult:
        return JobResult(job_id=job_id, docx_path=docx_path, status=status, details=details)
