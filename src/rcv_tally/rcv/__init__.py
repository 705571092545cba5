from rcv_tally.rcv.base import InstantRunoff

__all__ = ["InstantRunoff"]
