"""Domain layer: exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""
