from .chain import FallbackExhaustedError, OutcomeKind, StrategyOutcome, run_chain

__all__ = ["FallbackExhaustedError", "OutcomeKind", "StrategyOutcome", "run_chain"]
