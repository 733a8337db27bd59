"""Application layer: services, DTOs and repository ports."""
