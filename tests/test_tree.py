import pytest

from textpack.tree import INTERNAL, Node, build_tree


def _leaves(node):
    if node.is_leaf:
        yield node
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _leaves(child)


def _internal_nodes(node):
    if node.is_leaf:
        return
    yield node
    for child in (node.left, node.right):
        if child is not None:
            yield from _internal_nodes(child)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        build_tree([])


def test_single_node_is_root():
    leaf = Node("a", 5)
    assert build_tree([leaf]) is leaf


def test_two_nodes_smaller_goes_left():
    big = Node("a", 3)
    small = Node("b", 1)
    root = build_tree([big, small])
    assert root.left is small
    assert root.right is big
    assert root.character == INTERNAL


def test_root_frequency_is_sum():
    nodes = [Node(ch, f) for ch, f in zip("abcde", [5, 9, 12, 13, 16])]
    root = build_tree(nodes)
    assert root.frequency == sum(n.frequency for n in nodes)


def test_all_leaves_preserved():
    nodes = [Node(ch, f) for ch, f in zip("wxyz", [1, 2, 3, 4])]
    root = build_tree(nodes)
    assert {leaf.character for leaf in _leaves(root)} == set("wxyz")


def test_internal_nodes_sum_children():
    nodes = [Node(ch, f) for ch, f in zip("abcdef", [7, 1, 4, 4, 2, 9])]
    root = build_tree(nodes)
    internal = list(_internal_nodes(root))

    assert len(internal) == len(nodes) - 1
    mismatched = [
        node
        for node in internal
        if node.frequency != node.left.frequency + node.right.frequency
    ]
    assert mismatched == []


def test_input_list_not_mutated():
    nodes = [Node("a", 1), Node("b", 2), Node("c", 3)]
    before = list(nodes)
    build_tree(nodes)
    assert nodes == before


def test_leaf_property():
    assert Node("a", 1).is_leaf
    assert not Node(INTERNAL, 2, Node("a", 1), Node("b", 1)).is_leaf