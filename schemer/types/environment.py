"""Runtime environment for schemer.

The Environment stores bindings of identifier names to Values and supports
nested lexical scopes via an `outer` link. A frame owns its own bindings; the
`outer` link is only ever traversed, never written after construction.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from schemer.errors import UndefinedError, SchemerInternalError
from schemer.types.value import Value


class Environment:
    """Hierarchical mapping from identifier names to Values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this frame, replacing any earlier binding."""
        if not isinstance(name, str) or not name:
            raise SchemerInternalError(f"Cannot define {name!r} as an identifier")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`, walking outward.

        Raises UndefinedError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedError(name)
        return env.vars[name]

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def extend(self, names: Iterable[str], values: Iterable[Value]) -> Environment:
        """Create a child frame binding `names` to `values`, with self as parent."""
        child = Environment(outer=self)
        for name, value in zip(names, values):
            child.define(name, value)
        return child

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
