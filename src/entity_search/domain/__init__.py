"""Domain layer: plain data types, no behavior beyond serialization."""
