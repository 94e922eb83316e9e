"""Tests for the import extractors."""

from pathlib import Path

import pytest

from import_map.extractor import extract_imports, get_extractor
from import_map.extractor.script_extractor import ScriptImportExtractor
from import_map.extractor.vue_extractor import VueImportExtractor
from import_map.models import ImportDeclaration

FIXTURES = Path(__file__).parent / "fixtures" / "project" / "src"


def _by_path(imports):
    return {imp.path: imp.type_only for imp in imports}


def test_various_import_forms():
    source = """
import { ref, computed } from 'vue'
import type { Component } from 'vue'
import { type User, getName } from './user'
import axios from 'axios'
import './styles.css'
import Button from '@/components/Button.vue'
"""
    imports = ScriptImportExtractor().extract_from_text(source)

    assert [i.path for i in imports] == [
        "vue", "./user", "axios", "./styles.css", "@/components/Button.vue",
    ]
    flags = _by_path(imports)
    assert flags["vue"] is False  # plain import beats `import type`
    assert flags["./user"] is False  # mixed import is runtime
    assert flags["./styles.css"] is False


def test_mixed_inline_type_import_is_runtime():
    source = """
import type { Comp } from 'vue'
import { getName } from './user'
import { type User, getName } from './user'
"""
    imports = ScriptImportExtractor().extract_from_text(source)
    user = [i for i in imports if i.path == "./user"]
    assert len(user) == 1
    assert user[0].type_only is False
    assert _by_path(imports)["vue"] is True


def test_type_only_declaration_forms():
    source = """
import type { A } from './a'
import type B from './b'
import type * as C from './c'
"""
    flags = _by_path(ScriptImportExtractor().extract_from_text(source))
    assert flags == {"./a": True, "./b": True, "./c": True}


def test_all_inline_type_bindings_are_runtime():
    source = "import { type A, type B } from './d'\n"
    imports = ScriptImportExtractor().extract_from_text(source)
    assert imports == [ImportDeclaration(path="./d", type_only=False)]


def test_runtime_import_dominates_regardless_of_order():
    runtime_first = "import { a } from './x'\nimport type { B } from './x'\n"
    type_first = "import type { B } from './x'\nimport { a } from './x'\n"
    extractor = ScriptImportExtractor()
    assert _by_path(extractor.extract_from_text(runtime_first)) == {"./x": False}
    assert _by_path(extractor.extract_from_text(type_first)) == {"./x": False}


def test_default_and_namespace_imports_are_runtime():
    source = """
import React, { type FC } from 'react'
import * as path from 'path'
import type from './type-named-default'
"""
    flags = _by_path(ScriptImportExtractor().extract_from_text(source))
    assert flags == {"react": False, "path": False, "./type-named-default": False}


def test_multiline_named_import():
    source = """
import {
  type Foo,
  type Bar,
} from './types'
import {
  alpha,
  beta,
} from './values'
"""
    flags = _by_path(ScriptImportExtractor().extract_from_text(source))
    assert flags == {"./types": False, "./values": False}


def test_dynamic_imports_are_runtime():
    source = """
const module = await import('./lazy-module')
import('./another-module').then(mod => mod.default)
"""
    imports = ScriptImportExtractor().extract_from_text(source)
    assert [i.path for i in imports] == ["./lazy-module", "./another-module"]
    assert all(not i.type_only for i in imports)


def test_require_calls_are_runtime():
    imports = ScriptImportExtractor().extract_from_text("const fs = require('fs')\n")
    assert _by_path(imports) == {"fs": False}


def test_side_effect_does_not_override_type_only():
    source = "import type { T } from './t'\nimport './t'\n"
    assert _by_path(ScriptImportExtractor().extract_from_text(source)) == {"./t": True}


def test_first_seen_order_follows_source_text():
    source = """
const lazy = import('./late')
import type { T } from './types'
import { a } from './a'
"""
    imports = ScriptImportExtractor().extract_from_text(source)
    assert [i.path for i in imports] == ["./late", "./types", "./a"]


def test_reexports_are_ignored():
    imports = ScriptImportExtractor().extract_from_text("export { a } from './a'\n")
    assert imports == []


def test_vue_file_scans_script_block():
    imports = extract_imports(FIXTURES / "App.vue")
    flags = _by_path(imports)
    assert flags == {"vue": False, "./stores/user": False, "./types/user": True}


def test_vue_file_without_script_has_no_imports():
    assert extract_imports(FIXTURES / "views" / "Lazy.vue") == []


def test_vue_only_first_script_block():
    source = """
<script lang="ts">
import { a } from './a'
</script>
<script setup lang="ts">
import { b } from './b'
</script>
"""
    assert _by_path(VueImportExtractor().extract_from_text(source)) == {"./a": False}


def test_detect_type_only_disabled():
    source = "import type { A } from './a'\n"
    imports = extract_imports("x.ts", source=source, detect_type_only=False)
    assert _by_path(imports) == {"./a": False}


def test_get_extractor_by_extension():
    assert isinstance(get_extractor(Path("a.vue")), VueImportExtractor)
    assert isinstance(get_extractor(Path("a.tsx")), ScriptImportExtractor)
    with pytest.raises(ValueError):
        get_extractor(Path("a.py"))


def test_extract_reads_file(tmp_path):
    f = tmp_path / "mod.ts"
    f.write_text("import { x } from './x'\n", encoding="utf-8")
    assert _by_path(extract_imports(f)) == {"./x": False}
