"""Infrastructure: auth service client, session cache, persistence."""
