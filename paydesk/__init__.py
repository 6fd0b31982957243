"""Pay Desk - console login gate and weekly payroll calculator."""

__version__ = "1.0.0"
