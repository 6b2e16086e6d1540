"""
Unit tests for the wizard session state.
"""

import pytest

from btcconf.fields import SessionSealedError, UnknownFieldError, ValidationError


class TestSessionState:
    """Tests for SessionState get/set/snapshot."""

    def test_seeded_with_defaults(self, session, registry):
        """Test that a new session holds every default."""
        assert dict(session.snapshot()) == registry.defaults()
        assert session.get("datadir") == ""
        assert session.get("txindex") is False

    def test_set_and_get(self, session):
        session.set("datadir", "/data/btc")
        assert session.get("datadir") == "/data/btc"

    def test_unknown_key(self, session):
        with pytest.raises(UnknownFieldError):
            session.get("nope")
        with pytest.raises(UnknownFieldError):
            session.set("nope", "x")

    def test_snapshot_is_immutable(self, session):
        snapshot = session.snapshot()
        with pytest.raises(TypeError):
            snapshot["datadir"] = "/tmp"  # type: ignore[index]

    def test_snapshot_is_a_copy(self, session):
        """Test that later commits do not leak into an earlier snapshot."""
        snapshot = session.snapshot()
        session.set("datadir", "/data/btc")
        assert snapshot["datadir"] == ""

    def test_choice_must_be_declared(self, session):
        with pytest.raises(ValidationError) as exc_info:
            session.set("chain", "mars")
        assert exc_info.value.field == "chain"
        assert session.get("chain") == "main"

        session.set("chain", "signet")
        assert session.get("chain") == "signet"

    def test_kind_checks(self, session):
        with pytest.raises(ValidationError):
            session.set("txindex", "yes")
        with pytest.raises(ValidationError):
            session.set("datadir", True)

    def test_sealed_session_rejects_writes(self, session):
        session.seal()
        assert session.sealed is True
        with pytest.raises(SessionSealedError):
            session.set("datadir", "/data/btc")
        assert session.get("datadir") == ""


    def test_home_expanded_on_commit(self, session, monkeypatch):
        """Test that a ~ path is stored expanded."""
        monkeypatch.setenv("HOME", "/home/satoshi")

        session.set("datadir", "~/.bitcoin")
        session.set("walletdir", "~/wallets")

        assert session.get("datadir") == "/home/satoshi/.bitcoin"
        assert session.get("walletdir") == "/home/satoshi/wallets"

    def test_other_text_not_normalized(self, session):
        session.set("startupNotify", " ~/notify.sh ")
        assert session.get("startupNotify") == " ~/notify.sh "


class TestValidationOnWrite:
    """Tests for validators running inside SessionState.set."""

    def test_prune_rejected_when_txindex_set(self, session):
        """Test txindex=true then prune=550 keeps the prior prune value."""
        session.set("txindex", True)

        with pytest.raises(ValidationError) as exc_info:
            session.set("prune", "550")

        assert exc_info.value.field == "prune"
        assert "txindex" in exc_info.value.message
        assert session.get("prune") == "0"

    def test_prune_accepted_without_txindex(self, session):
        session.set("prune", "550")
        assert session.get("prune") == "550"

    def test_no_retroactive_invalidation(self, session):
        """Test that enabling txindex later does not reject the committed prune."""
        session.set("prune", "550")
        session.set("txindex", True)

        assert session.get("prune") == "550"
        assert session.get("txindex") is True

        with pytest.raises(ValidationError):
            session.set("prune", "551")
        assert session.get("prune") == "550"

    @pytest.mark.parametrize("key", ["reindex", "reindexChainstate"])
    def test_reindex_gate(self, session, key):
        """Test the guarded field before and after its guard is affirmed."""
        with pytest.raises(ValidationError) as exc_info:
            session.set(key, True)
        assert exc_info.value.field == key
        assert session.get(key) is False

        session.set("reindexAcknowledged", True)
        session.set(key, True)
        assert session.get(key) is True

    def test_reindex_false_needs_no_acknowledgement(self, session):
        session.set("reindex", False)
        assert session.get("reindex") is False
