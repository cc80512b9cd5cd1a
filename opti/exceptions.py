class OptiError(Exception):
    """Base for all opti exceptions."""

    pass


class ConfigurationError(OptiError, ValueError):
    """Invalid construction parameters for a problem, recombinator or strategy."""

    pass
