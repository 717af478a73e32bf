"""Domain layer: value objects, ports and exceptions. No rich imports."""
