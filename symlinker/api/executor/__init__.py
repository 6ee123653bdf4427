"""Executor API domain: render plans and run them."""
