"""Pay Desk command-line interface."""
