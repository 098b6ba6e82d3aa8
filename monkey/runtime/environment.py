"""Lexical scopes. Each Environment owns its own bindings and holds a plain reference to its enclosing Environment, so
any number of inner scopes (call frames, closures) can share one outer scope and all of them see its latest bindings.
"""


class Environment:
    """Mapping of names to runtime values, chained to an optional outer Environment."""

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    @classmethod
    def create_enclosed(cls, outer):
        """Returns a new, empty scope whose misses are looked up in outer."""
        return cls(outer)

    def get(self, name):
        """Returns the value bound to name in this scope or the nearest enclosing one, or None if name is unbound."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name, value):
        """Binds name to value in this scope only. Bindings in enclosing scopes are shadowed, never overwritten."""
        self.store[name] = value
        return value

    def __eq__(self, other):
        return isinstance(other, Environment) and self.store == other.store and self.outer == other.outer

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, outer={self.outer!r})"
