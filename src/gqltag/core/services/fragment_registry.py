"""Process-wide record of fragment bodies by fragment name."""


class FragmentRegistry:
    """Maps each fragment name to every normalized body seen for it.

    The registry only grows until clear() is called. A name with more
    than one body means two parts of the application define the same
    fragment differently.
    """

    def __init__(self) -> None:
        self._bodies: dict[str, set[str]] = {}

    def register(self, name: str, body: str) -> bool:
        """Record a fragment body under its name.

        Args:
            name: The fragment name.
            body: The normalized fragment source.

        Returns:
            True if the name was already known with different bodies,
            i.e. this registration is a conflict. The body is recorded
            either way.
        """
        bodies = self._bodies.get(name)
        if bodies is None:
            self._bodies[name] = {body}
            return False

        if body in bodies:
            return False

        bodies.add(body)
        return True

    def bodies(self, name: str) -> frozenset[str]:
        """Get every body registered under a name.

        Args:
            name: The fragment name.

        Returns:
            The registered bodies, empty if the name is unknown.
        """
        return frozenset(self._bodies.get(name, ()))

    def names(self) -> list[str]:
        """Get every registered fragment name, in registration order."""
        return list(self._bodies)

    def is_conflicting(self, name: str) -> bool:
        """Check whether a name has been registered with several bodies.

        Args:
            name: The fragment name.

        Returns:
            True if more than one body is known for the name.
        """
        return len(self._bodies.get(name, ())) > 1

    def clear(self) -> None:
        """Forget all registered fragments."""
        self._bodies.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._bodies

    def __len__(self) -> int:
        return len(self._bodies)
