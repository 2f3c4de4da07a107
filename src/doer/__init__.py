"""doer - interactive task list manager with an RPC task ledger."""

__version__ = "0.1.0"
