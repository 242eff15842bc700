"""CLI commands for ledgerreport."""
