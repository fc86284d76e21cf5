from .definition import DefinitionError, Instruction, PDADefinition, TransitionKey
from .engine import Configuration, RejectReason, RunResult, Verdict, run, tokenize
from .playback import Mode, PlaybackController

__version__ = "0.1.0"
