"""In-memory state for the web API, no database required."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from import_map.models import AnalysisResult


@dataclass
class AnalysisSession:
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    working_dir: str = ""
    result: AnalysisResult | None = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class AppState:
    """Finished analyses keyed by session id."""

    def __init__(self):
        self.analyses: dict[str, AnalysisSession] = {}

    def add(self, session: AnalysisSession) -> None:
        self.analyses[session.id] = session

    def get(self, analysis_id: str) -> AnalysisSession | None:
        return self.analyses.get(analysis_id)

    def delete(self, analysis_id: str) -> bool:
        return self.analyses.pop(analysis_id, None) is not None

    def clear(self) -> None:
        self.analyses.clear()

