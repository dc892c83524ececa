# tests/core/validation/test_issues.py
"""
Testes do IssueTree: merge estrutural, serialização e linearização.
"""

from atlas_params.core.node import Node
from atlas_params.core.validation.issues import IssueTree, issues_to_strings, merge_issues


def test_merge_concatenates_messages_and_ors_flags():
    """
    Verifica o merge estrutural de dois relatórios.

    Mensagens da mesma chave são concatenadas na ordem dos argumentos;
    flags são combinadas por OU lógico.
    """
    left = IssueTree(parameters={"a": ["m1"]})
    right = IssueTree(parameters={"a": ["m2"], "b": ["m3"]}, execution=True)

    merged = left.merge(right)

    assert merged.parameters == {"a": ["m1", "m2"], "b": ["m3"]}
    assert merged.execution is True
    assert merged.type_unknown is False


def test_merge_does_not_mutate_inputs():
    left = IssueTree(parameters={"a": ["m1"]})
    right = IssueTree(parameters={"a": ["m2"]}, credentials={"api": ["c1"]})

    left.merge(right)

    assert left.parameters == {"a": ["m1"]}
    assert left.credentials == {}
    assert right.parameters == {"a": ["m2"]}


def test_merge_issues_ignores_none():
    merged = merge_issues(None, IssueTree(type_unknown=True), None)
    assert merged.type_unknown is True
    assert merge_issues().is_empty()


def test_to_dict_omits_empty_categories():
    assert IssueTree().to_dict() == {}
    tree = IssueTree(parameters={"a": ["m"]}, type_unknown=True)
    assert tree.to_dict() == {"parameters": {"a": ["m"]}, "typeUnknown": True}


def test_from_dict_reads_wire_format():
    tree = IssueTree.from_dict({"credentials": {"api": ["c"]}, "typeUnknown": True})
    assert tree.credentials == {"api": ["c"]}
    assert tree.type_unknown is True
    assert IssueTree.from_dict(None).is_empty()


def test_issues_to_strings_order():
    tree = IssueTree(
        parameters={"a": ["p1"], "b": ["p2"]},
        credentials={"api": ["c1"]},
        execution=True,
        type_unknown=True,
    )
    node = Node(name="n1", type="custom")

    assert issues_to_strings(tree, node) == [
        "Execution Error.",
        "p1",
        "p2",
        "c1",
        'Node Type "custom" is not known.',
    ]
    assert issues_to_strings(tree)[-1] == "Node Type is not known."


def test_issues_to_strings_none_is_empty():
    assert issues_to_strings(None) == []
