"""quicktask: a create-task form flow with pluggable task services."""

__version__ = "0.1.0"
