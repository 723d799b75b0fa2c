from dataclasses import dataclass
from typing import Callable, Optional
import inspect

KINDS = ("traversal", "path", "all_pairs", "spanning_tree")


@dataclass(frozen=True)
class AlgorithmSpec:
    """Describes a registered algorithm: route name, result kind, and required parameters."""
    name: str
    kind: str
    params: tuple[str, ...]
    func: Callable


def register_algorithm(name: str, kind: str, params: tuple[str, ...] = ()) -> Callable:
    """Decorator that marks a function as a registrable graph algorithm."""
    if kind not in KINDS:
        raise ValueError(f"Unknown algorithm kind '{kind}', expected one of {KINDS}")

    def decorator(func: Callable) -> Callable:
        func._is_algorithm = True
        func._algorithm_name = name
        func._algorithm_kind = kind
        func._algorithm_params = tuple(params)
        return func

    return decorator


class AlgorithmRegistry:
    """Registry for algorithm functions that can be looked up by route name."""

    def __init__(self) -> None:
        self._algorithms: dict[str, AlgorithmSpec] = {}

    def register(self, name: str, func: Callable, kind: str, params: tuple[str, ...] = ()) -> None:
        """Register a callable under the given name."""
        self._algorithms[name] = AlgorithmSpec(name=name, kind=kind, params=tuple(params), func=func)

    def register_from_module(self, module: object) -> None:
        """Scan a module for callables marked with @register_algorithm and register them."""
        for _name, obj in inspect.getmembers(module, callable):
            if getattr(obj, "_is_algorithm", False):
                self.register(
                    obj._algorithm_name,
                    obj,
                    kind=obj._algorithm_kind,
                    params=obj._algorithm_params,
                )

    def get(self, name: str) -> Optional[Callable]:
        """Return the algorithm function registered under name, or None."""
        spec = self._algorithms.get(name)
        return spec.func if spec is not None else None

    def list_algorithms(self) -> list[str]:
        """Return a sorted list of all registered algorithm names."""
        return sorted(self._algorithms.keys())

    def describe(self) -> list[dict[str, object]]:
        """Return name, kind and required parameters for each algorithm, sorted by name."""
        return [
            {"name": spec.name, "kind": spec.kind, "params": list(spec.params)}
            for spec in sorted(self._algorithms.values(), key=lambda s: s.name)
        ]
