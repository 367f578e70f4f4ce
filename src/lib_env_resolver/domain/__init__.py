"""Pure domain layer: key naming, the resolver value object, and errors."""
