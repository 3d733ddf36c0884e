from ....base.version import Version
from .trunk.trunk import TrunkList


class V1(Version):
    def __init__(self, domain) -> None:
        super().__init__(domain, "v1")
        self._trunks = None

    @property
    def trunks(self) -> TrunkList:
        if self._trunks is None:
            self._trunks = TrunkList(self)
        return self._trunks

    def __repr__(self) -> str:
        return "<Twilio.Trunking.V1>"
