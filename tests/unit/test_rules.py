"""
Unit tests for visibility and validation rules.
"""

import pytest

from btcconf.fields import ValidationError
from btcconf.fields.rules import (
    expand_user,
    get_normalizer,
    get_predicate,
    get_validator,
    prune_conflicts_with_txindex,
    reindex_requested,
    requires_reindex_acknowledgement,
    rpc_enabled,
    wallet_enabled,
)
from btcconf.fields.exceptions import CatalogError
from btcconf.fields.models import always_visible
from btcconf.wizard.core import visible_groups

PRUNE_VALUES = ["1", "550", "1000", "", "00", "abc", " 0"]


class TestVisibility:
    """Tests for group visibility predicates."""

    def test_rpc_enabled(self):
        assert rpc_enabled({"server": True}) is True
        assert rpc_enabled({"server": False}) is False
        assert rpc_enabled({}) is False

    def test_wallet_enabled(self):
        assert wallet_enabled({"disableWallet": False}) is True
        assert wallet_enabled({"disableWallet": True}) is False
        assert wallet_enabled({}) is False

    def test_reindex_requested(self):
        assert reindex_requested({"reindexRequested": True}) is True
        assert reindex_requested({"reindexRequested": False}) is False

    def test_predicates_do_not_mutate_state(self):
        """Test that predicates leave the state untouched."""
        state = {"server": True, "disableWallet": False}
        rpc_enabled(state)
        wallet_enabled(state)
        reindex_requested(state)
        assert state == {"server": True, "disableWallet": False}

    @pytest.mark.parametrize(
        "key",
        ["datadir", "chain", "txindex", "prune", "maxMempool", "persistMempool", "par"],
    )
    def test_unrelated_fields_do_not_change_visibility(self, registry, key):
        """Test that toggling a field no predicate reads keeps the same groups."""
        state = registry.defaults()
        before = [g.key for g in visible_groups(registry, state)]

        spec = registry.get_field(key)
        if isinstance(spec.default, bool):
            state[key] = not spec.default
        elif spec.choices:
            state[key] = spec.choice_values[-1]
        else:
            state[key] = "changed"

        after = [g.key for g in visible_groups(registry, state)]
        assert before == after

    def test_default_visibility(self, registry):
        """Test which groups are shown with every field at its default."""
        keys = [g.key for g in visible_groups(registry, registry.defaults())]
        assert "rpc" not in keys
        assert "wallet" not in keys
        assert "danger_zone" not in keys
        assert "basics" in keys

    def test_lookup(self):
        """Test looking up rules by name."""
        assert get_predicate(None) is always_visible
        assert get_predicate("rpc_enabled") is rpc_enabled
        assert get_validator(None) is None
        with pytest.raises(CatalogError):
            get_predicate("unknown")
        with pytest.raises(CatalogError):
            get_validator("unknown")
        assert get_normalizer("expand_user") is expand_user
        assert get_normalizer(None) is None
        with pytest.raises(CatalogError):
            get_normalizer("unknown")


class TestPruneValidation:
    """Tests for the prune/txindex exclusion."""

    @pytest.mark.parametrize("value", PRUNE_VALUES)
    def test_rejected_with_txindex(self, value):
        with pytest.raises(ValidationError) as exc_info:
            prune_conflicts_with_txindex(value, {"txindex": True})

        message = exc_info.value.message
        assert "txindex" in message
        assert "Transaction Index" in message

    @pytest.mark.parametrize("value", PRUNE_VALUES)
    def test_accepted_without_txindex(self, value):
        prune_conflicts_with_txindex(value, {"txindex": False})

    def test_zero_always_accepted(self):
        prune_conflicts_with_txindex("0", {"txindex": True})
        prune_conflicts_with_txindex("0", {"txindex": False})


class TestReindexGate:
    """Tests for the reindex confirmation gate."""

    def test_true_rejected_without_acknowledgement(self):
        with pytest.raises(ValidationError):
            requires_reindex_acknowledgement(True, {"reindexAcknowledged": False})

        with pytest.raises(ValidationError):
            requires_reindex_acknowledgement(True, {})

    def test_true_accepted_after_acknowledgement(self):
        requires_reindex_acknowledgement(True, {"reindexAcknowledged": True})

    def test_false_always_accepted(self):
        requires_reindex_acknowledgement(False, {"reindexAcknowledged": False})
        requires_reindex_acknowledgement(False, {"reindexAcknowledged": True})


class TestExpandUser:
    """Tests for the ~ expansion applied to path answers."""

    @pytest.fixture(autouse=True)
    def home(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/satoshi")

    def test_expands_home(self):
        assert expand_user("~/.bitcoin") == "/home/satoshi/.bitcoin"
        assert expand_user("~") == "/home/satoshi"

    def test_absolute_path_unchanged(self):
        assert expand_user("/data/btc") == "/data/btc"

    def test_blank_stays_blank(self):
        assert expand_user("") == ""

    def test_surrounding_whitespace_dropped(self):
        assert expand_user("  ~/btc ") == "/home/satoshi/btc"
