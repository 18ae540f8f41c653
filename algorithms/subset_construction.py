#!/usr/bin/env python3
# Subset (powerset) construction: NFA with epsilon transitions -> DFA

from automata.dfa import DFA
from automata.nfa import NFA, closure, move

from collections import deque
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple
import logging

__all__ = ["StateLimitExceeded", "canonical_key", "closure", "convert", "move"]

logger = logging.getLogger(__name__)

class StateLimitExceeded(RuntimeError):
    """ raised when a conversion discovers more DFA states than it was allowed to """
    def __init__(self, limit : int):
        RuntimeError.__init__(self, "subset construction exceeded the limit of " + str(limit) + " DFA states")
        self.limit = limit

def canonical_key(states : Iterable[str]) -> str:
    """ order independent name of a set of states, e.g. {q1, q0, q1} -> '{q0,q1}' """
    return "{" + ",".join(sorted(set(states))) + "}"

def convert(nfa : NFA, max_states : Optional[int] = None) -> DFA:
    """
    breadth first subset construction.

    every DFA state is the epsilon closure of a set of NFA states, named by its
    canonical key. a key is registered (and queued) the first time it is seen,
    so each set of NFA states becomes exactly one DFA state and only sets
    reachable from the initial state are ever visited.

    an empty target set produces no transition (implicit reject). if
    max_states is given and more DFA states than that are discovered,
    StateLimitExceeded is raised and no DFA is returned
    """
    transitions = nfa.transition_function_hashmap
    nfa_acceptance_states = set(nfa.acceptance_states)
    logger.debug("converting NFA with %d states over %r", len(nfa.states), nfa.alphabet)

    # arena of discovered subsets, indexed by dense id
    subsets : List[FrozenSet[str]] = []
    keys : List[str] = []
    key_to_index : Dict[str, int] = {}

    def register(subset : Set[str]) -> int:
        key = canonical_key(subset)
        new_index = len(subsets)
        index = key_to_index.setdefault(key, new_index)
        if index == new_index:
            if max_states is not None and new_index >= max_states:
                raise StateLimitExceeded(max_states)
            subsets.append(frozenset(subset))
            keys.append(key)
            queue.append(index)
            logger.debug("discovered DFA state %s", key)
        return index

    queue = deque()
    initial_index = register(closure([nfa.initial_state], transitions))

    dfa_transitions : List[Tuple[str, str, str]] = []
    dfa_acceptance_states = []

    while queue:
        index = queue.popleft()
        subset = subsets[index]

        if not subset.isdisjoint(nfa_acceptance_states):
            dfa_acceptance_states.append(keys[index])

        for symbol in nfa.alphabet:
            target = closure(move(subset, symbol, transitions), transitions)
            if not target : continue

            target_index = register(target)
            dfa_transitions.append((keys[index], symbol, keys[target_index]))

    logger.debug("subset construction finished with %d DFA states", len(keys))

    return DFA(
        keys,
        keys[initial_index],
        dfa_acceptance_states,
        nfa.alphabet,
        dfa_transitions,
        subsets=dict(zip(keys, subsets)))
