"""
Variable environments for the letlang interpreter.

Environments form a chain via the `parent` field for lexical scoping.
A `let` extends the current environment with a child holding one
binding; the child is dropped when the let returns, so the enclosing
environment never sees it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Set

from .values import Value, wrap_python
from ..errors import error_unbound_identifier


@dataclass
class Environment:
    """
    A single scope containing variable bindings.

    Lookups fall through to the parent on a miss; bindings in this
    scope shadow the parent's.
    """
    variables: Dict[str, Value] = field(default_factory=dict)
    parent: Optional["Environment"] = None

    @classmethod
    def from_mapping(cls, bindings: Mapping[str, Any]) -> "Environment":
        """Create a root environment from raw Python values or Values."""
        env = cls()
        for ident, raw in bindings.items():
            env.bind(ident, raw if isinstance(raw, Value) else wrap_python(raw))
        return env

    def get(self, name: str) -> Optional[Value]:
        """Look up a variable in this scope or parent scopes."""
        if name in self.variables:
            return self.variables[name]
        if self.parent is not None:
            return self.parent.get(name)
        return None

    def lookup(self, name: str, line: int = None) -> Value:
        """
        Look up a variable, failing if it is unbound.

        Raises:
            EvaluationError: if no scope in the chain binds `name`
        """
        value = self.get(name)
        if value is None:
            raise error_unbound_identifier(name, line)
        return value

    def bind(self, name: str, value: Value) -> None:
        """Bind a variable in this scope (shadowing parent if exists)."""
        self.variables[name] = value

    def contains(self, name: str) -> bool:
        """Check if a variable exists in this scope or parents."""
        return self.get(name) is not None

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def names(self) -> Set[str]:
        """All identifiers visible from this scope."""
        visible = set(self.variables)
        if self.parent is not None:
            visible |= self.parent.names()
        return visible

    def extend(self, name: str, value: Value) -> "Environment":
        """Create a child scope holding one new binding."""
        child = Environment(parent=self)
        child.bind(name, value)
        return child

    def copy(self) -> "Environment":
        """
        Create an independent flat copy of every visible binding.

        Changes made to the copy or to this environment afterwards are
        not seen by the other.
        """
        flat = Environment()
        for ident in self.names():
            flat.bind(ident, self.get(ident))
        return flat
