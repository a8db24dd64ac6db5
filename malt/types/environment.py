"""Runtime environment for malt.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested scopes via an `outer` link. Environments form a tree rooted at
the interpreter's global environment; every link points toward the root.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from malt import LispValue
from malt.types.errors import MaltInvalidSymbol, MaltUnboundSymbol
from malt.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Create an empty frame whose enclosing scope is this one."""
        return Environment(outer=self)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only.

        An existing binding of `name` in an enclosing frame is shadowed, never
        overwritten. Raises MaltInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MaltInvalidSymbol(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises MaltUnboundSymbol if no frame up to the root binds it.
        """
        env = self.find(name)
        if env is None:
            raise MaltUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the root frame is elided."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None:
                    chain.append(f"<root: {len(env.vars)} bindings>")
                else:
                    frame = StringIO()
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
