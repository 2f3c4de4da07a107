"""RPC server exposing the task ledger over HTTP/JSON."""
