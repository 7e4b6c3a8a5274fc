from .chain import chain, chain_w, chainM

__all__ = (
    # LazyCoroResult
    "chain",
    # LazyCoroResultWriter
    "chain_w",
    # Generic
    "chainM",
)
