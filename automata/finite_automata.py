#!/usr/bin/env python3

from pydot import Dot, Edge, Node
from collections import deque
from typing import Dict, Iterable, List, Set, Tuple

"""
PARENT CLASS FOR NFA, DFA

follows from the classical definition of a finite automata
which is a 5-tuple, (Q, Sigma, T, q0, F)
where T : Q x Sigma -> P(Q) (where P(Q) is the powerset of Q)

transitions are given as (source, symbol, destination) triples. the empty
symbol is reserved for epsilon transitions and is never part of the alphabet.
"""

EPSILON = ''

def dot_id(name : str) -> str:
    """ double quoted dot id, e.g. {a"b} -> "{a\\"b}" (subset names aren't valid bare ids) """
    return '"' + name.replace('\\', '\\\\').replace('"', '\\"') + '"'

class Finite_Automata(object):
    def __init__(
        self,
        states : Iterable[str],
        initial_state : str, # this is really just a state label, not necessarily a state object
        acceptance_states : Iterable[str],
        alphabet : Iterable[str],
        transitions : Iterable[Tuple[str, str, str]] = ()):

        self.states = sorted(set(states))
        self.initial_state = initial_state
        # alphabet order is significant (conversion walks symbols in this order)
        self.alphabet = list(dict.fromkeys(alphabet))
        self.acceptance_states = sorted(set(acceptance_states))
        self.transitions = list(transitions)

        assert EPSILON not in self.alphabet, "epsilon (the empty symbol) is not allowed in the alphabet"
        assert self.initial_state in self.states, "initial state not in states"

        for state in self.acceptance_states:
            assert state in self.states, "acceptance state " + repr(state) + " not in states"

    def construct_transition_function_hashmap(self) -> None:
        """ constructs a hashmap with all the transition relations, e.g. T : State -> Alphabet -> P(State) """
        self.transition_function_hashmap : Dict[str, Dict[str, Set[str]]] = {}

        for state in self.states:
            self.transition_function_hashmap[state] = {}

        for (sA, i, sB) in self.transitions:
            assert sA in self.states, "transition source " + repr(sA) + " not in states"
            assert sB in self.states, "transition destination " + repr(sB) + " not in states"
            assert i in self.alphabet or i == EPSILON, "transition symbol " + repr(i) + " not in alphabet"
            self.transition_function_hashmap[sA].setdefault(i, set()).add(sB)

    def construct_reachability_hashmap(self) -> None:
        """ constructs a hashmap with all reachability relations,
        e.g. what states are immediately reachable from the current state """
        self.reachability_hashmap : Dict[str, Set[Tuple[str, str]]] = {}

        for state in self.states:
            self.reachability_hashmap[state] = set()

        for (sA, i, sB) in self.transitions:
            self.reachability_hashmap[sA].add((sB, i))

    def transition_function(self, state : str, char : str) -> List[str]:
        """ finite automata transition relation, e.g. state, char -> list of states"""
        if not hasattr(self, "transition_function_hashmap") : self.construct_transition_function_hashmap()
        assert state in self.states, "transition_function: state called not in automata"
        assert char in self.alphabet or char == EPSILON, "transition_function: char not in alphabet"
        return sorted(self.transition_function_hashmap[state].get(char, ()))

    def reachable_from(self, state : str) -> Set[str]:
        """ returns a set of all reachable states from the selected state """
        assert state in self.states, "reachable_from: state not in automata"
        if not hasattr(self, "reachability_hashmap") : self.construct_reachability_hashmap()
        queue = deque([state])
        visited = {state}
        while queue:
            current_state = queue.popleft()
            for (next_state, char) in self.reachability_hashmap[current_state]:
                if next_state not in visited:
                    visited.add(next_state)
                    queue.append(next_state)

        return visited

    def to_dot(self) -> Dot:
        """
        builds a graphviz graph of this finite automata. accepting states are
        double circles, the initial state gets an arrow from an invisible point
        """
        graph = Dot(graph_type='digraph', rankdir='LR')
        nodes = {}

        # the invisible start point must not share a name with a real state
        start = "__start"
        while start in self.states : start = "_" + start

        graph.add_node(Node(dot_id(start), shape='point', style='invis'))
        for state in self.states:
            if state in self.acceptance_states:
                nodes[state] = Node(dot_id(state), shape='doublecircle')
            else:
                nodes[state] = Node(dot_id(state), shape='circle')

            graph.add_node(nodes[state])

        graph.add_edge(Edge(dot_id(start), nodes[self.initial_state]))
        for (sA, i, sB) in self.transitions:
            if i == EPSILON:
                graph.add_edge(Edge(nodes[sA], nodes[sB], label='ε'))
            else:
                graph.add_edge(Edge(nodes[sA], nodes[sB], label=dot_id(i)))

        return graph

    def show_diagram(self, path : str = "automata.png") -> None:
        """ creates a diagram of this finite automata (requires the graphviz binaries) """
        self.to_dot().write_png(path)

    def to_ba_file(self, path : str = "out.ba") -> None:
        """
        turn this automata into a .ba formatted automata file
        see: https://languageinclusion.org/doku.php?id=tools#the_ba_format

        epsilon transitions are written with an empty label
        """
        outba = "[" + self.initial_state + "]\n"
        for (sA, i, sB) in self.transitions:
            outba += i + ",[" + sA + "]->[" + sB + "]\n"

        for state in self.acceptance_states:
            outba += "[" + state + "]\n"

        with open(path, 'w') as file:
            file.write(outba)
