"""
Function Map - Registry for built-in math functions.

This module provides a decorator-based registration system
for mapping function names to their implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

MathImpl = Callable[[list[float]], float]


@dataclass(frozen=True)
class MathFunction:
    """A registered function with the number of arguments it needs."""

    name: str
    impl: MathImpl
    min_args: int
    signature: str

    def __call__(self, args: list[float]) -> float:
        return self.impl(args)


class FunctionMap:
    """
    Registry for mapping function names to implementations.

    Usage:
        @FunctionMap.register("factorial", "fact", min_args=1)
        def factorial(args):
            ...

    Names are case-sensitive.
    """

    _registry: dict[str, MathFunction] = {}

    @classmethod
    def register(
        cls, *names: str, min_args: int = 1, signature: str = "x"
    ) -> Callable[[MathImpl], MathImpl]:
        """
        Register a function under one or more names.

        Args:
            *names: Names the function is callable by (defaults to its __name__)
            min_args: Fewest arguments the function accepts
            signature: Argument list shown in listings

        Returns:
            A decorator returning the function unchanged
        """

        def decorator(impl: MathImpl) -> MathImpl:
            for name in names or (impl.__name__,):
                cls._registry[name] = MathFunction(name, impl, min_args, signature)
            return impl

        return decorator

    @classmethod
    def get(cls, name: str) -> MathFunction | None:
        """
        Get the function registered under a name.

        Args:
            name: The function name to look up

        Returns:
            The registered function or None if not found
        """
        return cls._registry.get(name)

    @classmethod
    def list(cls) -> list[str]:
        """
        List all registered function names.

        Returns:
            Sorted list of registered names
        """
        return sorted(cls._registry.keys())

    @classmethod
    def signatures(cls) -> list[str]:
        """List every registered function as name(signature), sorted by name."""
        return [f"{name}({cls._registry[name].signature})" for name in cls.list()]
