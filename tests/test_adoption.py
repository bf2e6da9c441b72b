"""Tests for adoption form submission."""

from wysycs.adoption import AdoptionForm, submit_adoption

from tests.conftest import make_client


class TestAdoptionForm:
    def test_complete(self):
        assert AdoptionForm("Ana", "ana@example.com").is_complete()

    def test_whitespace_only_is_incomplete(self):
        assert not AdoptionForm("  ", "ana@example.com").is_complete()
        assert not AdoptionForm("Ana", "").is_complete()


class TestSubmitAdoption:
    def test_incomplete_form_makes_no_request(self, es):
        client, session = make_client({"POST /adopt": (200, {})})

        outcome = submit_adoption(client, 1, AdoptionForm("Ana", ""), es)

        assert not outcome.success
        assert outcome.error == "Por favor completa todos los campos requeridos"
        assert session.calls == []

    def test_success(self, es):
        client, session = make_client({"POST /adopt": (200, {"message": "Adopción exitosa"})})

        outcome = submit_adoption(client, 1, AdoptionForm(" Ana ", " ana@example.com ", ""), es)

        assert outcome.success
        assert outcome.guardian_email == "ana@example.com"
        assert outcome.response == {"message": "Adopción exitosa"}
        assert session.calls[0]["json"] == {
            "forest_id": 1,
            "guardian_name": "Ana",
            "guardian_email": "ana@example.com",
            "telegram_chat_id": None,
        }

    def test_server_detail_shown(self, es):
        client, _ = make_client({"POST /adopt": (400, {"detail": "Este bosque ya fue adoptado"})})

        outcome = submit_adoption(client, 1, AdoptionForm("Ana", "ana@example.com"), es)

        assert not outcome.success
        assert outcome.error == "Este bosque ya fue adoptado"

    def test_error_without_detail(self, es, connection_error):
        client, _ = make_client({"POST /adopt": connection_error})

        outcome = submit_adoption(client, 1, AdoptionForm("Ana", "ana@example.com"), es)

        assert not outcome.success
        assert outcome.error.startswith("No response from server")
