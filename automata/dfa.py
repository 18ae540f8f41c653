#!/usr/bin/env python3

from automata.finite_automata import Finite_Automata, EPSILON
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

class DFA(Finite_Automata):
    """
    deterministic finite automata: every (state, character) pair has at most
    one successor. a missing transition means the word is rejected.

    when built by subset construction, `subsets` maps each state to the set of
    NFA states it stands for
    """
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str,
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        transitions : Iterable[Tuple[str, str, str]] = (),
        subsets : Optional[Mapping[str, FrozenSet[str]]] = None):

        Finite_Automata.__init__(self, states, initial_state, acceptance_states, alphabet, transitions)
        self.subsets : Dict[str, FrozenSet[str]] = dict(subsets) if subsets is not None else {}

        self.construct_transition_function_hashmap()
        self.construct_reachability_hashmap()

    def construct_transition_function_hashmap(self) -> None:
        """ constructs the transition function hashmap, e.g. T : State -> Alphabet -> State """
        self.transition_function_hashmap : Dict[str, Dict[str, str]] = {}

        for state in self.states:
            self.transition_function_hashmap[state] = {}

        for (sA, i, sB) in self.transitions:
            assert sA in self.states, "transition source " + repr(sA) + " not in states"
            assert sB in self.states, "transition destination " + repr(sB) + " not in states"
            assert i != EPSILON, "DFA can't have epsilon transitions"
            assert i in self.alphabet, "transition symbol " + repr(i) + " not in alphabet"
            assert i not in self.transition_function_hashmap[sA], \
                "DFA not deterministic, " + repr(sA) + " has two transitions on " + repr(i)
            self.transition_function_hashmap[sA][i] = sB

    def transition_function(self, state : str, char : str) -> List[str]:
        """ deterministic transition, e.g. state, char -> [state] or [] if there is none """
        assert state in self.states, "transition_function: state called not in DFA"
        assert char in self.alphabet, "transition_function: char not in alphabet"
        if char in self.transition_function_hashmap[state]:
            return [self.transition_function_hashmap[state][char]]
        return []

    def edges(self) -> List[Tuple[str, str, str]]:
        """ (from, symbol, to) for every transition, in the order they were added """
        return list(self.transitions)

    def test_word(self, word : Sequence[str], current_state : Optional[str] = None) -> Set[str]:
        """
        test_word: word, initial state (opt) -> {final state} if it accepts, else empty set
        """
        if current_state == None : current_state = self.initial_state
        assert current_state in self.states, "test_word: initial state not in DFA"

        for char in word:
            assert char in self.alphabet, "test_word: character not in alphabet"
            current_state = self.transition_function_hashmap[current_state].get(char)
            # implicit dead state
            if current_state == None : return set()

        if current_state in self.acceptance_states : return {current_state}
        return set()
