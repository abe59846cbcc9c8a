"""Command-line client for the Arch User Repository RPC interface."""
