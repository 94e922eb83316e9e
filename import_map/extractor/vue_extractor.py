"""Vue single-file component extractor: scans the first <script> block only."""

from __future__ import annotations

import re

from import_map.extractor.script_extractor import ScriptImportExtractor
from import_map.models import ImportDeclaration

_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^>]*>(.*?)</script\s*>", re.DOTALL | re.IGNORECASE)


class VueImportExtractor(ScriptImportExtractor):
    extensions = (".vue",)

    def extract_from_text(self, text: str) -> list[ImportDeclaration]:
        script = _SCRIPT_BLOCK_RE.search(text)
        if script is None:
            return []
        return super().extract_from_text(script.group(1))
