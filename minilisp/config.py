"""
MiniLisp Configuration

This module provides configuration settings for interpreter resource
limits, verification limits, and logging.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class InterpreterConfig:
    """Configuration for the interpreter. None disables a limit."""
    max_recursion_depth: Optional[int] = None
    max_steps: Optional[int] = None


@dataclass
class VerifierConfig:
    """Configuration for static program checks."""
    max_depth: int = 200
    max_nodes: int = 100000


@dataclass
class MiniLispConfig:
    """Main configuration for MiniLisp."""
    interpreter: InterpreterConfig = None
    verifier: VerifierConfig = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.interpreter is None:
            self.interpreter = InterpreterConfig()
        if self.verifier is None:
            self.verifier = VerifierConfig()


# Global configuration instance
_config: Optional[MiniLispConfig] = None


def get_config() -> MiniLispConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = MiniLispConfig()
    return _config


def set_config(config: MiniLispConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def setup_logging(level: str = "WARNING") -> None:
    """Setup logging for MiniLisp."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
