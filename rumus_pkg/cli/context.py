from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ReplContext:
    """Holds the state of the interactive REPL session."""
    debug_mode: bool = False
    output_format: str = "human"
    variables: Dict[str, float] = field(default_factory=dict)
