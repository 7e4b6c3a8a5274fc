from .all import process_all, process_all_w, process_allM
from .policy import AllPolicy, RacePolicy
from .race import fastest, fastest_w, fastestM

__all__ = (
    # Policies
    "AllPolicy",
    "RacePolicy",
    # Aggregate-all
    "process_all",
    "process_all_w",
    "process_allM",
    # First-to-settle
    "fastest",
    "fastest_w",
    "fastestM",
)
