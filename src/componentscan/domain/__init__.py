"""Domain layer: component records, scan configuration, ports, exceptions.

No filesystem access here. Infrastructure provides adapters for the ports.
"""
