"""Web layer for ledgerreport."""

from ledgerreport.web.app import create_app

__all__ = ["create_app"]
