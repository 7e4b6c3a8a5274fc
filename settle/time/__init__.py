from .delay import delay, delay_w, delayM

__all__ = (
    "delay",
    "delay_w",
    "delayM",
)
