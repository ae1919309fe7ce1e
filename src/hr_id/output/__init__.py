"""CLI output: result contract and formatters."""
