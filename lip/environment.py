from typing import Dict, List, Optional

from lip.types import Value


class Environment:
    """Maps identifiers to values, with an optional enclosing scope.

    Lookups walk outward through `outer` until a binding is found. Bindings
    are only ever added to the innermost scope; an outer scope is read but
    never modified.
    """
    def __init__(self, values: Optional[Dict[str, Value]] = None, outer: Optional['Environment'] = None):
        self.values: Dict[str, Value] = dict(values) if values else {}
        self.outer = outer

    def get(self, name: str) -> Optional[Value]:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                return env.values[name]
            env = env.outer
        return None

    def add(self, name: str, value: Value) -> None:
        self.values[name] = value

    def names(self) -> List[str]:
        # innermost first; a shadowed name is listed once
        seen: List[str] = []
        env: Optional[Environment] = self
        while env is not None:
            for name in env.values:
                if name not in seen:
                    seen.append(name)
            env = env.outer
        return seen

    def __repr__(self) -> str:
        inner = ', '.join(f"{name}: {value}" for name, value in self.values.items())
        return f"Environment({{{inner}}}, outer={self.outer!r})"
