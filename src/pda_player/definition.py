import copy
import logging
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Set, Union

from .config import EPSILON, REJECT_SINK, REJECT_SINK_LABEL, RESERVED_SYMBOLS

logger = logging.getLogger(__name__)

INSTRUCTION_FIELDS = ("target", "pop", "push")


class DefinitionError(ValueError):
    """Raised when an edit would leave the automaton definition inconsistent."""


# ----------------------------- State labels -----------------------------

def state_label(state: Optional[int]) -> str:
    if state is None:
        return ""
    if state == REJECT_SINK:
        return REJECT_SINK_LABEL
    return f"q{state}"


def parse_state_label(value: Union[int, str, None]) -> Optional[int]:
    """
    Accepts an int, "qN", "qk" or an empty value (unset target).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise DefinitionError(f"Unknown state label '{value}'.")
    if isinstance(value, int):
        return value
    s = value.strip()
    if s == "":
        return None
    if s == REJECT_SINK_LABEL:
        return REJECT_SINK
    if s.startswith("q") and s[1:].isdigit():
        return int(s[1:])
    raise DefinitionError(f"Unknown state label '{value}'.")


# ----------------------------- Transition table -----------------------------

class TransitionKey(NamedTuple):
    state: int
    symbol: str

    def __str__(self):
        return f"{state_label(self.state)}-{self.symbol}"


@dataclass
class Instruction:
    target: Optional[int] = None   # None means not chosen yet
    pop: str = EPSILON
    push: str = EPSILON

    def is_complete(self) -> bool:
        return self.target is not None


# ----------------------------- PDA Definition -----------------------------

class PDADefinition:
    """
    Deterministic PDA as edited by the user: one instruction per (state, symbol).

    Any change to the alphabet or to the state count clears the instruction
    table, since its keys are built from both.
    """
    def __init__(self, alphabet: Optional[List[str]] = None, states: int = 1,
                 accepted_states: Optional[Set[int]] = None):
        if states < 1:
            raise DefinitionError("A PDA needs at least one state.")
        self.alphabet: List[str] = []
        for sym in alphabet or []:
            self._check_symbol(sym)
            if sym not in self.alphabet:
                self.alphabet.append(sym)
        self.states = states
        self.accepted_states: Set[int] = set()
        for q in accepted_states or set():
            self._check_state(q)
            self.accepted_states.add(q)
        self.instructions: Dict[TransitionKey, Instruction] = {}
        self.instructions_generated = False

    def __repr__(self):
        return (f"PDADefinition(alphabet={self.alphabet!r}, states={self.states}, "
                f"accepted_states={sorted(self.accepted_states)!r}, "
                f"instructions={len(self.instructions)})")

    # -- validation --

    @staticmethod
    def _check_symbol(sym: str):
        if sym in RESERVED_SYMBOLS:
            raise DefinitionError(f"'{sym}' is reserved and cannot be part of the alphabet.")

    def _check_state(self, state: int):
        if not 0 <= state < self.states:
            raise DefinitionError(f"State {state_label(state)} does not exist.")

    # -- alphabet / states --

    def add_symbol(self, sym: str):
        sym = (sym or "").strip()
        if sym:
            self._check_symbol(sym)
            if sym not in self.alphabet:
                self.alphabet.append(sym)
        self.reset_instructions()

    def remove_symbol(self, sym: str):
        if sym in self.alphabet:
            self.alphabet.remove(sym)
        self.reset_instructions()

    def set_state_count(self, n: int):
        if n < 1:
            raise DefinitionError("A PDA needs at least one state.")
        self.states = n
        self.accepted_states = {q for q in self.accepted_states if q < n}
        self.reset_instructions()

    def add_state(self):
        self.set_state_count(self.states + 1)

    def remove_state(self):
        if self.states > 1:
            self.set_state_count(self.states - 1)

    def toggle_accepting(self, state: int):
        self._check_state(state)
        if state in self.accepted_states:
            self.accepted_states.discard(state)
        else:
            self.accepted_states.add(state)

    # -- instructions --

    def keys(self) -> List[TransitionKey]:
        return [TransitionKey(q, sym) for q in range(self.states) for sym in self.alphabet]

    def generate_instruction_slots(self):
        self.instructions = {key: Instruction() for key in self.keys()}
        self.instructions_generated = True
        logger.debug("generated %d instruction slots", len(self.instructions))

    def reset_instructions(self):
        self.instructions = {}
        self.instructions_generated = False

    def set_instruction(self, key: TransitionKey, field: str, value):
        if field not in INSTRUCTION_FIELDS:
            raise DefinitionError(f"Unknown instruction field '{field}'.")

        key = TransitionKey(*key)
        if not 0 <= key.state < self.states or key.symbol not in self.alphabet:
            raise DefinitionError(f"No instruction slot {key} in this PDA.")
        instruction = self.instructions.get(key)
        if instruction is None:
            instruction = self.instructions[key] = Instruction()

        if field == "target":
            target = parse_state_label(value)
            if target is not None and target != REJECT_SINK:
                self._check_state(target)
            instruction.target = target
            return

        sym = value or EPSILON
        if sym != EPSILON and sym not in self.alphabet:
            raise DefinitionError(f"Cannot {field} '{sym}': only alphabet symbols or {EPSILON} are allowed.")
        setattr(instruction, field, sym)

    def instruction_for(self, state: int, sym: str) -> Optional[Instruction]:
        return self.instructions.get(TransitionKey(state, sym))

    def is_ready(self) -> bool:
        """True when every generated slot has a target chosen."""
        return (self.instructions_generated and
                all(instr.is_complete() for instr in self.instructions.values()))

    def copy(self) -> "PDADefinition":
        return copy.deepcopy(self)
