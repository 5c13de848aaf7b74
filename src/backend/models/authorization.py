"""
Authority and registrar membership.
"""

from dataclasses import dataclass, field


@dataclass
class AuthorizationSet:
    """One election authority plus the principals allowed to enroll voters."""

    authority: str
    registrars: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.registrars.add(self.authority)

    def is_authority(self, principal: str) -> bool:
        return principal == self.authority

    def is_registrar(self, principal: str) -> bool:
        # The authority is implicitly always a registrar
        return principal == self.authority or principal in self.registrars
