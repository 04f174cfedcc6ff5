from dataclasses import dataclass

@dataclass(frozen=True)
class WriteResult:
    excel_path: str
    sheet_name: str
    status: str  # created|appended|skipped
