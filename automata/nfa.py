#!/usr/bin/env python3
from __future__ import annotations

from automata.finite_automata import Finite_Automata, EPSILON
from typing import Iterable, Mapping, Optional, Sequence, Set, Tuple

"""
follows from the exact formal definition of a NFA
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> P(Q) (where P(Q) is the powerset of Q)

in this library we include epsilon transitions. e.g., we can
make a transition without consuming a character from a word.
epsilon transitions are written with the empty symbol, e.g. ('q0', '', 'q1')
"""

# characters that would make a subset name like {q0,q1} ambiguous
RESERVED_STATE_CHARS = "{},"

Transitions = Mapping[str, Mapping[str, Iterable[str]]]

def closure(states : Iterable[str], transitions : Transitions) -> Set[str]:
    """
    epsilon closure: every state reachable from `states` through zero or more
    epsilon transitions. states without an entry simply have no epsilon moves
    """
    result = set(states)
    stack = list(result)

    while stack:
        state = stack.pop()
        for next_state in transitions.get(state, {}).get(EPSILON, ()):
            if next_state not in result:
                result.add(next_state)
                stack.append(next_state)

    return result

def move(states : Iterable[str], symbol : str, transitions : Transitions) -> Set[str]:
    """ union of the destinations of every state on `symbol` (no closure) """
    result = set()
    for state in states:
        result.update(transitions.get(state, {}).get(symbol, ()))
    return result

class NFA(Finite_Automata):
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str,
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        transitions : Iterable[Tuple[str, str, str]] = ()):

        Finite_Automata.__init__(self, states, initial_state, acceptance_states, alphabet, transitions)

        for state in self.states:
            assert state != "", "state names must not be empty"
            assert not any(c in state for c in RESERVED_STATE_CHARS), \
                "state name " + repr(state) + " contains one of " + repr(RESERVED_STATE_CHARS)

        self.construct_transition_function_hashmap()
        self.construct_reachability_hashmap()

    def epsilon_closure(self, states : Iterable[str]) -> Set[str]:
        """ all states reachable from the given states through epsilon transitions only """
        return closure(states, self.transition_function_hashmap)

    def test_word(self, word : Sequence[str], current_state : Optional[str] = None) -> Set[str]:
        """
        test_word: word, initial state (opt) -> (set of acceptance states reached)

        simulates every run at once: the set of current states is closed under
        epsilon before and after each character
        """
        if current_state == None : current_state = self.initial_state
        assert current_state in self.states, "test_word: initial state not in NFA"

        current = self.epsilon_closure([current_state])
        for char in word:
            assert char in self.alphabet, "test_word: character not in alphabet"
            current = self.epsilon_closure(move(current, char, self.transition_function_hashmap))
            # no run survives, the rest of the word doesn't matter
            if not current : return set()

        return current & set(self.acceptance_states)
