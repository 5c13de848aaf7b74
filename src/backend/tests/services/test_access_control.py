"""
Tests for authority and registrar management.
"""

import pytest

from conftest import AUTHORITY, REGISTRAR
from core.exceptions import ErrorKind, InvalidInputError, UnauthorizedError


@pytest.mark.unit
class TestRegistrars:
    def test_add_registrar(self, service) -> None:
        assert service.add_registrar(AUTHORITY, REGISTRAR) is True
        assert service.is_registrar(REGISTRAR) is True
        assert REGISTRAR in service.get_registrars()

    def test_add_existing_registrar_is_noop(self, service) -> None:
        service.add_registrar(AUTHORITY, REGISTRAR)
        assert service.add_registrar(AUTHORITY, REGISTRAR) is False

    def test_add_requires_authority(self, service) -> None:
        service.add_registrar(AUTHORITY, REGISTRAR)
        with pytest.raises(UnauthorizedError) as exc_info:
            service.add_registrar(REGISTRAR, "registrar-2")
        assert exc_info.value.kind == ErrorKind.UNAUTHORIZED
        assert service.is_registrar("registrar-2") is False

    def test_remove_registrar_revokes_rights(self, service) -> None:
        service.add_registrar(AUTHORITY, REGISTRAR)
        assert service.remove_registrar(AUTHORITY, REGISTRAR) is True

        with pytest.raises(UnauthorizedError):
            service.register_voter(REGISTRAR, "voter-a")

    def test_cannot_remove_authority(self, service) -> None:
        with pytest.raises(InvalidInputError):
            service.remove_registrar(AUTHORITY, AUTHORITY)
        assert service.is_registrar(AUTHORITY) is True

    def test_authority_always_registrar(self, service) -> None:
        assert service.is_registrar(AUTHORITY) is True


@pytest.mark.unit
class TestTransferAuthority:
    def test_transfer_grants_full_control(self, service) -> None:
        previous = service.transfer_authority(AUTHORITY, "new-authority")

        assert previous == AUTHORITY
        assert service.get_authority() == "new-authority"
        assert service.is_registrar("new-authority") is True
        service.create_election("new-authority", "General", "", 24)

    def test_old_authority_loses_admin_rights(self, service) -> None:
        service.transfer_authority(AUTHORITY, "new-authority")
        with pytest.raises(UnauthorizedError):
            service.create_election(AUTHORITY, "General", "", 24)

    def test_old_authority_keeps_registrar_entry(self, service) -> None:
        service.transfer_authority(AUTHORITY, "new-authority")
        service.register_voter(AUTHORITY, "voter-a")
        assert service.get_voter_status("voter-a").is_registered is True

    @pytest.mark.parametrize("target", ["", "0x0000000000000000000000000000000000000000"])
    def test_transfer_rejects_null_principal(self, service, target: str) -> None:
        with pytest.raises(InvalidInputError):
            service.transfer_authority(AUTHORITY, target)
        assert service.get_authority() == AUTHORITY

    def test_transfer_requires_authority(self, service) -> None:
        with pytest.raises(UnauthorizedError):
            service.transfer_authority("intruder", "intruder")


@pytest.mark.unit
class TestServiceConstruction:
    def test_null_authority_rejected(self) -> None:
        from services.election_service import ElectionService

        with pytest.raises(InvalidInputError):
            ElectionService(authority="0x0")
