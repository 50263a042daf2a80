"""Player scores and card stacks.

Store-level operations imported by the HTTP routes and CLI commands, keeping
request parsing and response shaping out of the key layout.
"""
