"""Router configuration.

RouterConfig is a frozen dataclass: set once when the Router is created,
never mutated afterwards.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    The defaults give the classic ``get`` / ``post`` / ``put`` vocabulary
    plus the ``any`` registration shortcut::

        config = RouterConfig(methods=("get", "post", "put", "delete"))
    """

    # Methods an action can be bound to and looked up by
    methods: tuple[str, ...] = ("get", "post", "put")

    # Registration-only token that expands to every entry in ``methods``
    any_method: str = "any"

    @property
    def allowed_methods(self) -> tuple[str, ...]:
        """Every token ``add_route()`` accepts."""
        return (*self.methods, self.any_method)
