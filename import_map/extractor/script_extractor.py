"""JavaScript/TypeScript import extractor using regex patterns.

This is a lexical approximation, not a parser: import-like text inside
comments or strings is matched, and re-exports (``export ... from``) are
not treated as imports.
"""

from __future__ import annotations

import re

from import_map.extractor.base import BaseImportExtractor
from import_map.models import ImportDeclaration

# import type X from 'p' / import type { A } from 'p' / import type * as N from 'p'
_TYPE_DECL_RE = re.compile(
    r"""\bimport\s+type\s+(?:\{[^}]*\}|\*\s*as\s+[\w$]+|[\w$]+)\s*from\s*['"]([^'"]+)['"]""",
)
# Any other static declaration with bindings. The lookahead rejects
# `import type X`, but still accepts a default binding that is itself named `type`.
_STATIC_RE = re.compile(
    r"""\bimport\s+(?!type\s+(?!from\b)[\w${*])"""
    r"""(?P<clause>(?:[\w$]+\s*,\s*)?(?:\{[^}]*\}|\*\s*as\s+[\w$]+)|[\w$]+)"""
    r"""\s*from\s*['"](?P<path>[^'"]+)['"]""",
)
_SIDE_EFFECT_RE = re.compile(r"""\bimport\s*['"]([^'"]+)['"]""")
_DYNAMIC_RE = re.compile(r"""\bimport\s*\(\s*['"`]([^'"`$]+)['"`]\s*\)""")
_REQUIRE_RE = re.compile(r"""\brequire\s*\(\s*['"`]([^'"`$]+)['"`]\s*\)""")


class _ImportTable:
    """Path -> type-only flag, remembering where each path first appeared."""

    def __init__(self):
        self.type_only: dict[str, bool] = {}
        self.first_seen: dict[str, int] = {}

    def set(self, path: str, type_only: bool, pos: int) -> None:
        self.type_only[path] = type_only
        self._seen(path, pos)

    def set_if_absent(self, path: str, type_only: bool, pos: int) -> None:
        if path not in self.type_only:
            self.type_only[path] = type_only
        self._seen(path, pos)

    def _seen(self, path: str, pos: int) -> None:
        if pos < self.first_seen.get(path, pos + 1):
            self.first_seen[path] = pos

    def declarations(self) -> list[ImportDeclaration]:
        ordered = sorted(self.type_only, key=lambda p: self.first_seen[p])
        return [ImportDeclaration(path=p, type_only=self.type_only[p]) for p in ordered]


class ScriptImportExtractor(BaseImportExtractor):
    extensions = (".ts", ".tsx", ".mts", ".cts", ".js", ".jsx", ".mjs", ".cjs")

    def extract_from_text(self, text: str) -> list[ImportDeclaration]:
        table = _ImportTable()

        # Only a top-level `import type` is erased at compile time.
        for m in _TYPE_DECL_RE.finditer(text):
            table.set(m.group(1), True, m.start())

        # Every other declaration with bindings is runtime and always wins,
        # including `{ type A, type B }`, which still emits the module load.
        for m in _STATIC_RE.finditer(text):
            table.set(m.group("path"), False, m.start())

        # Side-effect and deferred loads only fill gaps.
        for regex in (_SIDE_EFFECT_RE, _DYNAMIC_RE, _REQUIRE_RE):
            for m in regex.finditer(text):
                table.set_if_absent(m.group(1), False, m.start())

        return table.declarations()
