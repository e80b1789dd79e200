"""Core type definitions for chestshops."""

type Copy[T] = T
"""Type alias marking a returned value as a detached deep copy.

Mutating a `Copy[T]` never changes world state. Write it back with
`world.set(entity, component)` to persist the change.
"""
