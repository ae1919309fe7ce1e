"""Domain layer — grammar rules, the grammar checker, and the Id value type.

This layer must never import from commands, output, or config.
"""
