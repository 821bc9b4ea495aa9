import pytest

from advent2016.day22 import Node, count_viable_pairs, parse_node, parse_nodes

LISTING = """root@ebhq-gridcenter# df -h
Filesystem              Size  Used  Avail  Use%
/dev/grid/node-x0-y0     10T    0T    10T    0%
/dev/grid/node-x0-y1     10T    5T     5T   50%
/dev/grid/node-x1-y0     10T    8T     2T   80%
"""


def test_parse_node():
    node = parse_node("/dev/grid/node-x0-y0     93T   71T    22T   76%")
    assert node == Node("/dev/grid/node-x0-y0", 93, 71, 22, 76)


def test_parse_node_rejects_garbage():
    with pytest.raises(ValueError):
        parse_node("Filesystem Size Used Avail Use%")


def test_parse_nodes_skips_header():
    nodes = parse_nodes(LISTING)
    assert [n.name for n in nodes] == [
        "/dev/grid/node-x0-y0",
        "/dev/grid/node-x0-y1",
        "/dev/grid/node-x1-y0",
    ]
    assert [n.used for n in nodes] == [0, 5, 8]


def test_count_viable_pairs():
    assert count_viable_pairs(parse_nodes(LISTING)) == 2


def test_count_is_order_independent():
    nodes = parse_nodes(LISTING)
    assert count_viable_pairs(nodes) == count_viable_pairs(list(reversed(nodes)))


def test_empty_nodes_are_never_sources():
    nodes = [Node("a", 10, 0, 10, 0), Node("b", 10, 0, 10, 0)]
    assert count_viable_pairs(nodes) == 0