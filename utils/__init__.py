"""
Helpers around the islands package, outside of the traversal core.

Modules:
    loader     - Grids read from JSON files
    generator  - Random grids
    display    - Rich rendering of grids and islands
"""
