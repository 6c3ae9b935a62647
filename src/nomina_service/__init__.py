"""Nómina service: employees and the payroll entries generated for them."""

__version__ = "0.1.0"
