from typing import Callable, Dict, Type

PROBLEM_REGISTRY: Dict[str, Type] = {}


def problem(name=None) -> Callable:
    """Decorator factory to register a Problem subclass in the global registry.

    Registered problems can be built by name with `get_problem`, which is how
    benchmark runs and tests pick a problem without importing its module.

    Args:
        name (str, optional): Registry name. If `None`, the class's `__name__` is used.
            Defaults to `None`.

    Returns:
        Callable: A decorator that registers the input class in `PROBLEM_REGISTRY`.

    Example:
        >>> @problem(name="sphere")
        >>> class SphereProblem(Problem):
        ...     ...
        >>> get_problem("sphere", num_dimensions=2)
    """
    def decorator(cls):
        problem_name = name or cls.__name__
        if problem_name in PROBLEM_REGISTRY:
            raise ValueError(f"Problem '{problem_name}' is already registered")
        PROBLEM_REGISTRY[problem_name] = cls
        return cls
    return decorator


def get_problem(name: str, **kwargs):
    """Instantiate a registered problem by name."""
    if name not in PROBLEM_REGISTRY:
        raise ValueError(
            f"Problem '{name}' not found in registry. Available: {sorted(PROBLEM_REGISTRY)}"
        )
    return PROBLEM_REGISTRY[name](**kwargs)
