class InstanceContext:
    """Addressable handle to a single resource (its URL), no payload.

    Subclasses define the verbs the endpoint supports (`fetch`, `update`,
    `delete`).
    """

    def __init__(self, version) -> None:
        self._version = version
        self._solution = {}
        self._uri = ""

    def remove(self) -> bool:
        return self.delete()

    def __repr__(self) -> str:
        context = " ".join(f"{k}={v}" for k, v in self._solution.items())
        return f"<{type(self).__name__} {context}>"
