"""Domain layer: ledger value objects and pure analytics services."""
