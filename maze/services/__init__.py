"""Turn resolution services (movement and combat)."""
