# tests/core/errors/test_exception_to_error.py
"""
Testes do mapeamento de exceções para ErrorPayload.

Os testes asseguram que:
- falhas arbitrárias de Steps viram STEP_EXECUTION_ERROR sem stack trace
- resultados malformados viram STEP_RESULT_MALFORMED com seus details
- erros de layout, registro e configuração viram PIPELINE_CONFIGURATION_ERROR
- demais PipelineException usam o nome da classe como código
"""

import json

import pytest

from ssr_pipeline.core.config.errors import InvalidSettingsError
from ssr_pipeline.core.engine.builder import InvalidLayoutError
from ssr_pipeline.core.errors import (
    PIPELINE_CONFIGURATION_ERROR,
    STEP_EXECUTION_ERROR,
    STEP_RESULT_MALFORMED,
    ErrorPayload,
    exception_to_error,
)
from ssr_pipeline.core.exceptions import MalformedStepResultError
from ssr_pipeline.core.pipeline.registry import UnknownStepError
from ssr_pipeline.core.pipeline.types import ensure_result
from ssr_pipeline.steps.common import MissingPropError


def test_generic_exception_maps_to_execution_error():
    payload = exception_to_error(RuntimeError("backend down"))

    assert isinstance(payload, ErrorPayload)
    assert payload.type == STEP_EXECUTION_ERROR
    assert payload.message == "backend down"
    assert payload.details == {"exception_class": "RuntimeError"}
    assert payload.hint is None


def test_empty_message_gets_default_text():
    payload = exception_to_error(ValueError())
    assert payload.message


def test_malformed_result_keeps_details():
    with pytest.raises(MalformedStepResultError) as exc_info:
        ensure_result({"notFound": True}, step_id="with_auth")

    payload = exception_to_error(exc_info.value)

    assert payload.type == STEP_RESULT_MALFORMED
    assert payload.details["step_id"] == "with_auth"
    assert payload.details["received"] == "dict"


@pytest.mark.parametrize(
    "exc",
    [
        InvalidLayoutError("layout must be a list, got str"),
        UnknownStepError("Unknown step: ghost"),
        InvalidSettingsError("'pipeline.id' deve ser uma string não vazia"),
    ],
)
def test_configuration_errors(exc):
    payload = exception_to_error(exc)
    assert payload.type == PIPELINE_CONFIGURATION_ERROR
    assert payload.message == str(exc)
    assert payload.details == {"exception_class": type(exc).__name__}


def test_pipeline_exception_uses_class_name():
    exc = MissingPropError(message="Step 'with_albums' requer a prop 'user'", details={"missing": "user"})

    payload = exception_to_error(exc)

    assert payload.type == "MissingPropError"
    assert payload.details == {"missing": "user"}


def test_payload_is_json_serialisable():
    data = exception_to_error(KeyError("user")).to_dict()
    assert set(data) == {"type", "message", "details", "hint"}
    json.dumps(data)
