"""External Importer Test Suite.

This package contains the unit tests for the importer project.

Test Structure:
- unit/: Unit tests for contributors, field mappings, namespace profiles and the CLI
"""

__version__ = "0.1.0"
