"""Domain layer for ledgerreport.

Services are imported from their own modules (``ledgerreport.domain.cashflow``
etc.) so that the database layer can import entities without pulling them in.
"""
