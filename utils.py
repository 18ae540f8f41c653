#!/usr/bin/env python3

from automata.nfa import NFA
from automata.finite_automata import EPSILON
from typing import List, NamedTuple, Optional, Set, Tuple

import logging
import random

logger = logging.getLogger(__name__)

class ParseError(NamedTuple):
    field : str # which input field is wrong, e.g. "transitions"
    message : str

class ParseResult(NamedTuple):
    nfa : Optional[NFA]
    error : Optional[ParseError]

def _split_list(text : str) -> List[str]:
    """ 'q0, q1,,q2' -> ['q0', 'q1', 'q2'] """
    return [item.strip() for item in text.split(",") if item.strip()]

def _fail(field : str, message : str) -> ParseResult:
    logger.debug("could not parse NFA, %s: %s", field, message)
    return ParseResult(None, ParseError(field, message))

def parse_nfa(
    states : str,
    alphabet : str,
    transitions : str,
    start_state : str,
    accept_states : str) -> ParseResult:
    """
    builds a NFA out of the five text fields a user fills in, e.g.

        states:         q0, q1, q2
        alphabet:       a, b
        transitions:    q0-a-q0,q1; q0-b-q0; q1-a-q2; q1--q2
        start state:    q0
        accept states:  q2

    a transition is source-symbol-destinations, an empty symbol is an epsilon
    transition. never raises: returns either the NFA or the reason it failed
    """
    state_list = _split_list(states)
    alphabet_list = _split_list(alphabet)
    accept_list = _split_list(accept_states)
    start_state = start_state.strip()

    if state_list == [] : return _fail("states", "no states given")
    if start_state == "" : return _fail("start_state", "no start state given")
    if start_state not in state_list:
        return _fail("start_state", "start state " + repr(start_state) + " is not one of the states")

    for state in accept_list:
        if state not in state_list:
            return _fail("accept_states", "accept state " + repr(state) + " is not one of the states")

    triples : List[Tuple[str, str, str]] = []
    for entry in transitions.split(";"):
        entry = entry.strip()
        if entry == "" : continue

        parts = entry.split("-")
        if len(parts) != 3:
            return _fail("transitions", "expected source-symbol-destinations, got " + repr(entry))

        source, symbol, destinations = parts[0].strip(), parts[1].strip(), parts[2]
        if source not in state_list:
            return _fail("transitions", "unknown state " + repr(source) + " in " + repr(entry))
        if symbol != EPSILON and symbol not in alphabet_list:
            return _fail("transitions", "symbol " + repr(symbol) + " in " + repr(entry) + " is not in the alphabet")

        for destination in _split_list(destinations):
            if destination not in state_list:
                return _fail("transitions", "unknown state " + repr(destination) + " in " + repr(entry))
            triples.append((source, symbol, destination))

    try:
        nfa = NFA(state_list, start_state, accept_list, alphabet_list, triples)
    except AssertionError as e:
        # only the state name check is left to fail here
        return _fail("states", str(e))

    return ParseResult(nfa, None)

def _strip_brackets(state : str) -> str:
    state = state.strip()
    if state.startswith("[") and state.endswith("]") : return state[1:-1]
    return state

def read_ba_to_nfa(filename : str) -> NFA:
    """
    reads a .ba file and converts it to a NFA
    (first line initial state, then label,src->dest lines, then acceptance states)
    an empty label is an epsilon transition
    """
    with open(filename, 'r') as file:
        lines = file.readlines()

    states = set()
    acceptance_states = set()
    transitions = []
    alphabet = []

    initial_state = _strip_brackets(lines[0])
    states.add(initial_state)

    for line in lines[1:]:
        line = line.strip()

        # Parse transition
        if "->" in line:
            label, transition = line.split(",", 1)
            src, dest = transition.split("->")
            src, dest = _strip_brackets(src), _strip_brackets(dest)

            states.add(src)
            states.add(dest)
            if label != EPSILON and label not in alphabet : alphabet.append(label)

            transitions.append((src, label, dest))

        # Parse acceptance state
        elif line:
            state = _strip_brackets(line)
            states.add(state)
            acceptance_states.add(state)

    return NFA(states, initial_state, acceptance_states, alphabet, transitions)

def generate_random_nfa(
    num_states : int = 10, # Number of states
    num_acceptance_states : int = 1, # Number of acceptance states
    max_transitions : Optional[int] = None, # Max number of transitions generated
    custom_alphabet : Set[str] = {"a","b","c"},
    no_epsilon : bool = True,
    seed : Optional[int] = None) -> NFA:
    """ Generates a random NFA, states are q0 ... q{num_states - 1} and q0 is initial """

    assert num_states > 0, "Number of states must be at least 1"
    assert 0 <= num_acceptance_states <= num_states, "Number of acceptance states must be between 0 and the number of states"
    assert custom_alphabet or not no_epsilon or not max_transitions, \
        "Need at least one symbol (or epsilon transitions) to generate transitions"
    rng = random.Random(seed)

    states = ['q' + str(i) for i in range(num_states)]
    initial_state = states[0]
    acceptance_states = rng.sample(states, num_acceptance_states)

    # sorted so that a seed always gives the same automata
    alphabet = sorted(custom_alphabet)

    if max_transitions is None:
        max_transitions = len(states) * len(alphabet)

    symbols = alphabet if no_epsilon else alphabet + [EPSILON]
    transitions = []
    for _ in range(max_transitions):
        start_state = rng.choice(states)
        end_state = rng.choice(states)
        transitions.append((start_state, rng.choice(symbols), end_state))

    return NFA(states, initial_state, acceptance_states, alphabet, transitions)
