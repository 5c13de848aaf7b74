"""
Registrar repository: the election authority and its delegated registrars.
"""

from models.ledger import ElectionLedgerState


class RegistrarRepository:
    """Repository for the authorization set."""

    def __init__(self, state: ElectionLedgerState):
        self.state = state

    @property
    def authority(self) -> str:
        return self.state.authorization.authority

    def is_authority(self, principal: str) -> bool:
        return self.state.authorization.is_authority(principal)

    def is_registrar(self, principal: str) -> bool:
        return self.state.authorization.is_registrar(principal)

    def add(self, principal: str) -> bool:
        """Add a registrar. Returns False if it was already present."""
        registrars = self.state.authorization.registrars
        if principal in registrars:
            return False
        registrars.add(principal)
        return True

    def remove(self, principal: str) -> bool:
        """Remove a registrar. Returns False if it was not present."""
        registrars = self.state.authorization.registrars
        if principal not in registrars:
            return False
        registrars.discard(principal)
        return True

    def set_authority(self, principal: str) -> str:
        """Hand authority to a new principal and return the previous one."""
        previous = self.state.authorization.authority
        self.state.authorization.authority = principal
        self.state.authorization.registrars.add(principal)
        return previous

    def list_registrars(self) -> list[str]:
        return sorted(self.state.authorization.registrars)
