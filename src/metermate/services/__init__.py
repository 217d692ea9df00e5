"""Business-rule services."""
