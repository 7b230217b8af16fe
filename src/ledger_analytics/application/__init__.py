"""Application layer: read ports, DTOs and analytics queries."""
