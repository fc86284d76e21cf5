import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from .config import EPSILON, STACK_BOTTOM
from .definition import Instruction, PDADefinition, state_label

logger = logging.getLogger(__name__)


# ----------------------------- Results -----------------------------

class RejectReason(Enum):
    UNDEFINED_INSTRUCTION = "no instruction defined"
    EMPTY_STACK_POP = "pop on empty stack"
    STACK_MISMATCH_POP = "wrong top-of-stack symbol"
    NOT_ACCEPTING_AT_END = "final state not accepting"
    STACK_NOT_EMPTY_AT_END = "stack not empty"


@dataclass(frozen=True)
class Verdict:
    accepted: bool
    reason: Optional[RejectReason] = None
    detail: str = field(default="", compare=False)

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(True)

    @classmethod
    def reject(cls, reason: RejectReason, detail: str = "") -> "Verdict":
        return cls(False, reason, detail)

    @property
    def message(self) -> str:
        if self.accepted:
            return "String accepted"
        return f"String rejected - {self.reason.value}"


@dataclass(frozen=True)
class Configuration:
    state: int
    remaining: Tuple[str, ...]
    stack: Tuple[str, ...]              # bottom first, top last
    note: str = field(default="", compare=False)

    @property
    def top(self) -> str:
        return self.stack[-1]

    @property
    def remaining_text(self) -> str:
        return "".join(self.remaining)


class RunResult(NamedTuple):
    trace: Tuple[Configuration, ...]
    verdict: Verdict


Symbols = Union[str, Sequence[str]]


# ----------------------------- Input tokenizing -----------------------------

def tokenize(alphabet: Sequence[str], text: str) -> List[str]:
    """
    Split `text` into alphabet symbols, longest symbol first.

    Characters that start no symbol become one-character symbols of their
    own, so the run later stops on them with an undefined instruction.
    """
    ordered = sorted(set(alphabet), key=len, reverse=True)
    out: List[str] = []
    i = 0
    while i < len(text):
        for sym in ordered:
            if text.startswith(sym, i):
                out.append(sym)
                i += len(sym)
                break
        else:
            out.append(text[i])
            i += 1
    return out


# ----------------------------- Execution -----------------------------

def _usable(instr: Optional[Instruction]) -> bool:
    if instr is None or not instr.is_complete():
        return False
    return STACK_BOTTOM not in (instr.pop, instr.push)


def _describe(state: int, sym: str, instr: Instruction) -> str:
    return (f"δ({state_label(state)}, {sym}) → "
            f"({state_label(instr.target)}, pop {instr.pop}, push {instr.push})")


def step(definition: PDADefinition, cfg: Configuration) -> Union[Configuration, Verdict]:
    """
    Consume one input symbol.

    Returns the next configuration, or a rejecting Verdict when the move is
    impossible. `cfg` must have input left.
    """
    sym = cfg.remaining[0]
    # qk and any state outside [0, N) have no outgoing moves
    instr = None
    if 0 <= cfg.state < definition.states:
        instr = definition.instruction_for(cfg.state, sym)
    if not _usable(instr):
        return Verdict.reject(RejectReason.UNDEFINED_INSTRUCTION,
                              f"δ({state_label(cfg.state)}, {sym}) = undefined")

    stack = list(cfg.stack)
    if instr.pop != EPSILON:
        if stack[-1] == STACK_BOTTOM:
            return Verdict.reject(RejectReason.EMPTY_STACK_POP,
                                  f"δ({state_label(cfg.state)}, {sym}) pops {instr.pop} from an empty stack")
        if stack[-1] != instr.pop:
            return Verdict.reject(RejectReason.STACK_MISMATCH_POP,
                                  f"δ({state_label(cfg.state)}, {sym}) pops {instr.pop} but top is {stack[-1]}")
        stack.pop()

    if instr.push != EPSILON:
        stack.append(instr.push)

    return Configuration(
        state=instr.target,
        remaining=cfg.remaining[1:],
        stack=tuple(stack),
        note=_describe(cfg.state, sym, instr),
    )


def final_verdict(definition: PDADefinition, cfg: Configuration) -> Verdict:
    if cfg.state not in definition.accepted_states:
        return Verdict.reject(RejectReason.NOT_ACCEPTING_AT_END,
                              f"{state_label(cfg.state)} is not an accepting state")
    if cfg.stack != (STACK_BOTTOM,):
        return Verdict.reject(RejectReason.STACK_NOT_EMPTY_AT_END,
                              f"stack still holds {' '.join(cfg.stack[1:])}")
    return Verdict.accept()


def run(definition: PDADefinition, input_symbols: Symbols) -> RunResult:
    """
    Run the automaton on `input_symbols` from q0 with only the bottom marker
    on the stack.

    A string is read one character per symbol. The returned trace starts with
    the initial configuration and gains one entry per consumed symbol; a
    rejected move is not recorded. Failures are reported in the verdict,
    never raised.
    """
    cfg = Configuration(0, tuple(input_symbols), (STACK_BOTTOM,), note="start")
    trace: List[Configuration] = [cfg]
    logger.debug("run: %d symbols on %r", len(cfg.remaining), definition)

    while cfg.remaining:
        nxt = step(definition, cfg)
        if isinstance(nxt, Verdict):
            logger.debug("run rejected after %d steps: %s", len(trace) - 1, nxt.detail)
            return RunResult(tuple(trace), nxt)
        cfg = nxt
        trace.append(cfg)

    verdict = final_verdict(definition, cfg)
    logger.debug("run finished after %d steps: %s", len(trace) - 1, verdict.message)
    return RunResult(tuple(trace), verdict)
