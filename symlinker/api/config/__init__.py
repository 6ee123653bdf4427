"""Config API domain."""
