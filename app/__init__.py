"""opportunity-hub: tag resolution and session-aware API for the opportunity discovery platform."""
