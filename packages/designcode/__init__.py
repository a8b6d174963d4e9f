"""designcode - structured design-code generation for print/manufacturing jobs."""

__version__ = "0.1.0"
