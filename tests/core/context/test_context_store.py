# tests/core/context/test_context_store.py
"""
Testes do store de contexto por execução.

Os testes asseguram que:
- buckets `flow` e `node:<nome>` são criados preguiçosamente
- o mesmo bucket (mesma referência) é retornado em acessos seguintes
- tipos de contexto desconhecidos e nodes ausentes são rejeitados
- a criação de buckets é registrada como evento estruturado
"""

import pytest

from atlas_params.core.context.store import (
    FLOW_CONTEXT,
    NODE_CONTEXT,
    ContextTypeError,
    ExecutionContextStore,
    context_key,
)


def test_context_keys():
    assert context_key(FLOW_CONTEXT) == "flow"
    assert context_key(NODE_CONTEXT, "fetch") == "node:fetch"


@pytest.mark.parametrize(
    "kind, node",
    [("run", None), (NODE_CONTEXT, None), (NODE_CONTEXT, "  ")],
)
def test_invalid_context_is_rejected(kind, node):
    with pytest.raises(ContextTypeError):
        context_key(kind, node)


def test_buckets_are_lazy_and_stable():
    store = ExecutionContextStore(run_id="run-1")
    assert store.keys() == []
    assert not store.has(FLOW_CONTEXT)

    bucket = store.get(FLOW_CONTEXT)
    bucket["counter"] = 1

    assert store.get(FLOW_CONTEXT) is bucket
    assert store.get(FLOW_CONTEXT)["counter"] == 1
    assert store.has(FLOW_CONTEXT)


def test_node_buckets_are_isolated():
    store = ExecutionContextStore(run_id="run-1")
    store.get(NODE_CONTEXT, "a")["seen"] = True

    assert store.get(NODE_CONTEXT, "b") == {}
    assert store.keys() == ["node:a", "node:b"]


def test_bucket_creation_is_logged_once():
    store = ExecutionContextStore(run_id="run-7")
    store.get(NODE_CONTEXT, "a")
    store.get(NODE_CONTEXT, "a")

    assert len(store.events) == 1
    event = store.events[0]
    assert event["run_id"] == "run-7"
    assert event["scope"] == "node:a"
    assert event["level"] == "DEBUG"
    assert event["message"] == "context bucket created"
    assert "timestamp" in event


def test_log_accepts_extra_fields():
    store = ExecutionContextStore(run_id="run-1")
    store.log(scope="flow", level="INFO", message="resolved", node="a", fields=3)
    assert store.events[0]["node"] == "a"
    assert store.events[0]["fields"] == 3


def test_invalid_get_does_not_create_buckets():
    store = ExecutionContextStore(run_id="run-1")
    with pytest.raises(ContextTypeError):
        store.get("run")
    assert store.keys() == []
    assert store.events == []
