from automata.dfa import DFA

import pytest

# accepts words over {a, b} ending in "ab"
dfa1_transitions = [
    ('p0', 'a', 'p1'),
    ('p0', 'b', 'p0'),
    ('p1', 'a', 'p1'),
    ('p1', 'b', 'p2'),
    ('p2', 'a', 'p1'),
    ('p2', 'b', 'p0')
]

dfa1 = DFA(["p0", "p1", "p2"], "p0", ["p2"], ["a", "b"], dfa1_transitions)

# partial DFA, p1 has no moves at all
dfa2 = DFA(["p0", "p1"], "p0", ["p1"], ["a", "b"], [('p0', 'a', 'p1')])

def test_word():
    assert dfa1.test_word(["a", "b"]) == {'p2'}
    assert dfa1.test_word(["b", "b", "a", "b"]) == {'p2'}
    assert dfa1.test_word(["a", "b", "a"]) == set()
    assert dfa1.test_word([]) == set()
    assert dfa1.test_word([], "p2") == {'p2'}

def test_missing_transition_rejects():
    assert dfa2.test_word(["a"]) == {'p1'}
    assert dfa2.test_word(["a", "a"]) == set()
    assert dfa2.test_word(["b"]) == set()
    assert dfa2.transition_function("p1", "a") == []
    assert dfa2.transition_function("p0", "a") == ['p1']

def test_edges_keep_order():
    assert dfa1.edges() == dfa1_transitions

def test_not_deterministic():
    with pytest.raises(AssertionError):
        DFA(["p0", "p1"], "p0", [], ["a"], [('p0', 'a', 'p0'), ('p0', 'a', 'p1')])

def test_no_epsilon_transitions():
    with pytest.raises(AssertionError):
        DFA(["p0", "p1"], "p0", [], ["a"], [('p0', '', 'p1')])

def test_reachable_from():
    assert dfa2.reachable_from("p0") == {'p0', 'p1'}
    assert dfa2.reachable_from("p1") == {'p1'}

def test_ba_file(tmp_path):
    path = tmp_path / "dfa1.ba"
    dfa1.to_ba_file(str(path))
    lines = path.read_text().splitlines()

    assert lines[0] == "[p0]"
    assert "b,[p1]->[p2]" in lines
    assert lines[-1] == "[p2]"
