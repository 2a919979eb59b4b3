from fractions import Fraction

from huffpack.code import BitCode
from huffpack.dictionary import build_dictionary
from huffpack.frequencies import FrequencyTable
from huffpack.tree import Node, build_node_list, build_tree

TEXT = b"she sells sea shells by the sea shore"


def _dictionary_for(data):
    table = FrequencyTable()
    table.add_bytes(data)
    return table, build_dictionary(build_tree(build_node_list(table)))


def test_every_byte_has_a_code():
    _, dictionary = _dictionary_for(TEXT)
    assert set(dictionary) == set(TEXT)


def test_codes_are_prefix_free():
    _, dictionary = _dictionary_for(TEXT)
    codes = [str(code) for code in dictionary.values()]
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)


def test_kraft_equality():
    _, dictionary = _dictionary_for(TEXT)
    assert sum(Fraction(1, 2 ** len(code)) for code in dictionary.values()) == 1


def test_frequent_bytes_have_shorter_codes():
    table, dictionary = _dictionary_for(TEXT)
    for a in dictionary:
        for b in dictionary:
            if table[a] > table[b]:
                assert len(dictionary[a]) <= len(dictionary[b])


def test_two_leaves():
    root = Node(0, 3, Node(65, 1), Node(66, 2))
    dictionary = build_dictionary(root)
    assert dictionary == {65: BitCode([0]), 66: BitCode([1])}


def test_single_leaf_gets_empty_code():
    dictionary = build_dictionary(Node(9, 4))
    assert dictionary == {9: BitCode()}


def test_none_root():
    assert build_dictionary(None) == {}


def test_codes_follow_tree_paths():
    table = FrequencyTable()
    table.add_bytes(TEXT)
    root = build_tree(build_node_list(table))
    dictionary = build_dictionary(root)
    for byte, code in dictionary.items():
        node = root
        for bit in code:
            node = node.right if bit else node.left
        assert node.is_leaf()
        assert node.byte == byte