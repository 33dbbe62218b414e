from promptcraft.infrastructure.identity import SessionIdentityProvider
from tests.fakes import new_user_id


class TestSessionIdentityProvider:
    def test_starts_signed_out(self):
        assert SessionIdentityProvider().current_user_id() is None

    def test_sign_in_and_out(self):
        identity = SessionIdentityProvider()
        user_id = new_user_id()

        identity.sign_in(user_id)
        assert identity.current_user_id() == user_id

        identity.sign_out()
        assert identity.current_user_id() is None
