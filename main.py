from __future__ import annotations

import logging
from pathlib import Path

from menumaker.jobcontroller.api import submit


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    project_root = str(Path(__file__).resolve().parent)
    input_dir = Path(project_root) / "input"
    documents = sorted(input_dir.glob("*.docx"))

    if not documents:
        print(f"no .docx files in {input_dir}")
        return

    for document in documents:
        print("=" * 50)
        print(f"JOB: {document.name}")
        print("=" * 50)
        res = submit(str(document), project_root)
        print(f"status: {res.status}")
        print(f"job_id: {res.job_id}")
        print(f"docx_path: {res.docx_path}")
        if res.details:
            for k, v in res.details.items():
                print(f"{k}: {v}")
        print()

if __name__ == "__main__":
    main()
