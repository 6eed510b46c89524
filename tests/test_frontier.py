import pytest

from termpath import Algorithm, FifoFrontier, Node, PriorityFrontier, make_frontier


def test_priority_tie_break_f_then_g_then_index():
    pq = PriorityFrontier()
    pq.push(5, 2, 4)
    pq.push(3, 3, 4)
    pq.push(1, 2, 4)
    pq.push(9, 0, 6)
    pq.push(7, 1, 3)
    assert len(pq) == 5
    popped = [pq.pop() for _ in range(5)]
    assert popped == [Node(3, 1, 7), Node(4, 2, 1), Node(4, 2, 5), Node(4, 3, 3), Node(6, 0, 9)]
    assert pq.pop() is None


def test_priority_keeps_duplicates():
    pq = PriorityFrontier()
    pq.push(4, 5, 5)
    pq.push(4, 3, 3)
    assert sorted(pq.indices()) == [4, 4]
    assert pq.pop().g == 3
    assert pq.pop().g == 5


def test_fifo_ignores_keys():
    q = FifoFrontier()
    q.push(8, 9, 9)
    q.push(2, 0, 0)
    q.push(5, 1, 1)
    assert list(q.indices()) == [8, 2, 5]
    assert [q.pop().index for _ in range(3)] == [8, 2, 5]
    assert q.pop() is None
    assert len(q) == 0


def test_make_frontier():
    assert isinstance(make_frontier(Algorithm.BFS), FifoFrontier)
    assert isinstance(make_frontier(Algorithm.DIJKSTRA), PriorityFrontier)
    assert isinstance(make_frontier(Algorithm.ASTAR), PriorityFrontier)


def test_algorithm_parse_and_labels():
    assert Algorithm.parse("bfs") is Algorithm.BFS
    assert Algorithm.parse("Dijkstra") is Algorithm.DIJKSTRA
    assert Algorithm.parse("A*") is Algorithm.ASTAR
    assert Algorithm.parse("a-star") is Algorithm.ASTAR
    assert [a.label for a in Algorithm] == ["BFS", "Dijkstra", "A*"]
    with pytest.raises(ValueError):
        Algorithm.parse("dfs")
