"""Application layer: naming rules, resolution service, reporters.

Subpackages:
- naming: path -> component name translation
- services: ComponentResolver and matcher
- reporters: JSON and rich console output of resolution results
"""
