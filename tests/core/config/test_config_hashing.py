# tests/core/config/test_config_hashing.py
"""
Testes do hash canônico da configuração efetiva.

O hash é gravado no PipelineTrace e precisa ser estável entre execuções
e independente da ordem das chaves.
"""

import hashlib
import json

import pytest

from ssr_pipeline.core.config.hashing import compute_config_hash


def test_hash_is_deterministic():
    a = {"pipeline": {"id": "index", "trace": False}, "backend": {"delay_ms": 500}}
    b = {"backend": {"delay_ms": 500}, "pipeline": {"trace": False, "id": "index"}}

    h1 = compute_config_hash(a)
    h2 = compute_config_hash(b)

    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"pipeline": {"id": "início"}}
    canonical = json.dumps(cfg, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    expected = hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    assert compute_config_hash(cfg) == expected


def test_hash_changes_on_override():
    base = {"pipeline": {"trace": False}}
    changed = {"pipeline": {"trace": True}}
    assert compute_config_hash(base) != compute_config_hash(changed)


def test_hash_requires_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["pipeline"])
